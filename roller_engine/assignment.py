"""
assignment.py - 자유 입력 유전자 문자열 처리
입력 순서와 관계없이 토큰을 유전자 사전의 각 유전자에 배정
"""

import re
from typing import List, Dict, Optional, Sequence

from .models import GeneDictionary
from .genetics import GeneticsEngine
from .errors import InsufficientTokensError, UnassignableGeneError


TOKEN_SEPARATOR = re.compile(r'[/,\s]+')


def split_gene_string(raw: str) -> List[str]:
    """'Ee/Aa nZ' 같은 입력을 토큰 목록으로 분리 ('/', ',', 공백 기준)"""
    if raw.strip() == '':
        return []
    return [token.strip() for token in TOKEN_SEPARATOR.split(raw) if token.strip()]


def assign_tokens_to_genes(tokens: Sequence[str], dictionary: GeneDictionary) -> List[str]:
    """
    토큰을 유전자에 배정 (사전 순서의 목록 반환)

    1. 퍼넷 유전자 수보다 토큰이 적으면 실패
    2. 퍼넷 유전자마다 사전 순서대로, 아직 안 쓴 토큰 중 처음으로 유효한 것을 배정
       (최대 매칭이 아닌 first-fit 방식)
    3. 퍼센트 유전자는 남은 토큰 중 유효한 것이 있으면 배정, 없으면 빈 문자열

    Args:
        tokens: 분리된 유전자형 토큰
        dictionary: 유전자 사전

    Returns:
        유전자 사전 순서의 유전자형 문자열 목록
    """
    punnett_genes = dictionary.punnett_genes
    if len(tokens) < len(punnett_genes):
        raise InsufficientTokensError([g.name for g in punnett_genes], len(tokens))

    used = [False] * len(tokens)
    assignment: Dict[str, str] = {}

    for gene in punnett_genes:
        found = _first_unused(
            tokens, used,
            lambda token: GeneticsEngine.is_valid_genotype(token, gene.alleles)
        )
        if found is None:
            raise UnassignableGeneError(gene.name, gene.alleles)
        used[found] = True
        assignment[gene.name] = tokens[found]

    for gene in dictionary.percentage_genes:
        found = _first_unused(
            tokens, used,
            lambda token: GeneticsEngine.is_valid_percentage_genotype(token, gene.alleles)
        )
        if found is not None:
            used[found] = True
            assignment[gene.name] = tokens[found]

    return [assignment.get(name, '') for name in dictionary.names]


def _first_unused(tokens: Sequence[str], used: List[bool], is_valid) -> Optional[int]:
    """사용하지 않은 토큰 중 조건을 만족하는 첫 번째 인덱스"""
    for index, token in enumerate(tokens):
        if used[index]:
            continue
        if is_valid(token):
            return index
    return None
