"""
breeding.py - 교배 결과 계산기
유전자별 결과의 데카르트 곱, 중복 유전자형 합산, 정렬, 백분율 표시
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import List, Dict, Tuple, Sequence

from .models import GeneSpec, GeneDictionary, OddsConfig, Outcome, BreedingResult, Roller
from .genetics import GeneticsEngine
from .assignment import split_gene_string, assign_tokens_to_genes
from .errors import GeneticsError


# 유전자형 문자열에 나타날 수 없는 구분자
KEY_SEPARATOR = "\0"


class BreedingCalculator:
    """
    교배 결과 계산기

    처리 순서:
    1. 유전자별 결과 계산 (퍼넷 / 퍼센트)
    2. 데카르트 곱으로 전체 조합 생성
    3. 같은 유전자형 조합의 확률 합산
    4. 유전자형 순 정렬 후 확률 내림차순 (안정 정렬)
    """

    def breeding_outcomes(
        self,
        sire_genes: Sequence[str],
        dam_genes: Sequence[str],
        dictionary: GeneDictionary,
        odds: OddsConfig
    ) -> List[BreedingResult]:
        """
        부모 유전자형(사전 순서)으로 가능한 모든 자손 조합과 확률 계산

        Args:
            sire_genes: 부(父) 유전자형 목록 (예: ['Ee', 'Aa', 'nZ'])
            dam_genes: 모(母) 유전자형 목록
            dictionary: 유전자 사전
            odds: 확률 설정

        Returns:
            확률 내림차순 BreedingResult 목록
        """
        per_gene = self._per_gene_outcomes(sire_genes, dam_genes, dictionary, odds)
        if not per_gene:
            return []

        combined = self._cartesian_product(per_gene)
        aggregated = self._aggregate(combined)

        keys = sorted(aggregated, key=lambda k: k.split(KEY_SEPARATOR))
        keys.sort(key=lambda k: aggregated[k], reverse=True)

        return [
            BreedingResult(
                genotype=key.split(KEY_SEPARATOR),
                probability=aggregated[key],
                percentage=format_percentage(aggregated[key])
            )
            for key in keys
        ]

    def roll(self, sire_text: str, dam_text: str, roller: Roller) -> List[BreedingResult]:
        """
        자유 입력 문자열로 교배 (분리 -> 유전자 배정 -> 결과 계산)
        배정 오류에는 context['parent']에 'sire' 또는 'dam'이 기록됨
        """
        sire = self.assign_parent('sire', sire_text, roller.dictionary)
        dam = self.assign_parent('dam', dam_text, roller.dictionary)
        return self.breeding_outcomes(sire, dam, roller.dictionary, roller.odds)

    @staticmethod
    def assign_parent(parent: str, text: str, dictionary: GeneDictionary) -> List[str]:
        try:
            return assign_tokens_to_genes(split_gene_string(text), dictionary)
        except GeneticsError as e:
            e.context['parent'] = parent
            raise

    def contributing_genes(
        self,
        sire_genes: Sequence[str],
        dam_genes: Sequence[str],
        dictionary: GeneDictionary
    ) -> List[str]:
        """결과 유전자형 튜플에 실제로 포함되는 유전자 이름 (튜플 순서)"""
        return [
            gene.name
            for index, gene in enumerate(dictionary)
            if not _skipped(gene, _gene_at(sire_genes, index), _gene_at(dam_genes, index))
        ]

    def _per_gene_outcomes(
        self,
        sire_genes: Sequence[str],
        dam_genes: Sequence[str],
        dictionary: GeneDictionary,
        odds: OddsConfig
    ) -> List[List[Outcome]]:
        """결과에 포함되는 유전자별 결과 목록 (사전 순서)"""
        per_gene = []

        for index, gene in enumerate(dictionary):
            sire_raw = _gene_at(sire_genes, index)
            dam_raw = _gene_at(dam_genes, index)

            if _skipped(gene, sire_raw, dam_raw):
                continue

            if gene.is_punnett:
                sire_alleles = GeneticsEngine.parse_genotype(sire_raw, gene.alleles)
                dam_alleles = GeneticsEngine.parse_genotype(dam_raw, gene.alleles)
                per_gene.append(GeneticsEngine.punnett_outcomes(
                    sire_alleles, dam_alleles, gene.alleles, odds.punnett
                ))
            elif gene.is_percentage:
                sire_class = GeneticsEngine.classify_percentage_parent(sire_raw, gene.alleles)
                dam_class = GeneticsEngine.classify_percentage_parent(dam_raw, gene.alleles)
                per_gene.append(GeneticsEngine.percentage_outcomes(
                    sire_class, dam_class, gene.alleles, odds.percentage
                ))

        return per_gene

    def _cartesian_product(self, per_gene: List[List[Outcome]]) -> List[Tuple[str, float]]:
        """유전자별 결과의 데카르트 곱 (키, 확률곱)"""
        first, rest = per_gene[0], per_gene[1:]
        product = [(out.genotype, out.probability) for out in first]

        for outcomes in rest:
            product = [
                (key + KEY_SEPARATOR + out.genotype, probability * out.probability)
                for key, probability in product
                for out in outcomes
            ]

        return product

    def _aggregate(self, combined: List[Tuple[str, float]]) -> Dict[str, float]:
        """같은 유전자형 키의 확률 합산"""
        aggregated: Dict[str, float] = {}
        for key, probability in combined:
            aggregated[key] = aggregated.get(key, 0.0) + probability
        return aggregated


def _skipped(gene: GeneSpec, sire_raw: str, dam_raw: str) -> bool:
    # 퍼넷 유전자는 한쪽이라도 비어 있으면 조합에서 제외, 퍼센트 유전자는 항상 포함
    return gene.is_punnett and (sire_raw == '' or dam_raw == '')


def _gene_at(genes: Sequence[str], index: int) -> str:
    if index < len(genes) and genes[index] is not None:
        return genes[index].strip()
    return ''


def format_percentage(probability: float) -> str:
    """
    확률을 백분율 문자열로 변환 (소수 둘째 자리 반올림, 끝의 0 제거)
    0.25 -> '25', 0.125 -> '12.5', 1/3 -> '33.33'
    """
    pct = Decimal(repr(probability * 100)).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
    text = format(pct, 'f')
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text
