"""
genetics.py - 유전자형 해석 및 유전자별 결과 계산
대립유전자 분해, 우성 순서 정렬, 퍼넷 사각형 / 퍼센트 구간 교배
"""

from typing import List, Tuple, Dict, Sequence, Union

from .models import ParentClass, Outcome, PUNNETT_KEYS
from .errors import (
    EmptyGenotypeError,
    UnparseableGenotypeError,
    InvalidPercentageGenotypeError,
    InvalidOutcomeLabelError,
)


DEFAULT_CELL_WEIGHT = 25
FALLBACK_PERCENTAGE_BAND = {ParentClass.NONE.value: 100}


class GeneticsEngine:
    """유전자 하나에 대한 유전자형 처리 엔진"""

    @staticmethod
    def parse_genotype(genotype: str, alleles: Sequence[str]) -> Tuple[str, str]:
        """
        유전자형 문자열을 대립유전자 두 개로 분해

        긴 대립유전자부터 매칭하므로 'At'와 'A'가 모두 있으면 'At'가 먼저 사용됨.
        앞부분(first)이 맞아도 나머지가 어떤 대립유전자와도 같지 않으면
        다음 first 후보로 넘어감.

        Args:
            genotype: 부모 유전자형 (예: 'AtA')
            alleles: 허용 대립유전자 목록 (우성 순서)

        Returns:
            (첫 번째 대립유전자, 두 번째 대립유전자)
        """
        genotype = genotype.strip()
        if genotype == '':
            raise EmptyGenotypeError()

        # 길이 내림차순 (같은 길이는 원래 순서 유지)
        by_length = sorted(alleles, key=len, reverse=True)

        for first in by_length:
            if not genotype.startswith(first):
                continue
            remainder = genotype[len(first):]
            for second in by_length:
                if remainder == second:
                    return first, second

        raise UnparseableGenotypeError(genotype, list(alleles))

    @staticmethod
    def is_valid_genotype(genotype: str, alleles: Sequence[str]) -> bool:
        """대립유전자 두 개로 분해 가능한지 여부"""
        try:
            GeneticsEngine.parse_genotype(genotype, alleles)
        except (EmptyGenotypeError, UnparseableGenotypeError):
            return False
        return True

    @staticmethod
    def format_genotype(allele_pair: Sequence[str], dominance_order: Sequence[str]) -> str:
        """대립유전자 쌍을 우성 순서로 정렬하여 문자열로 결합"""
        order = {allele: index for index, allele in enumerate(dominance_order)}
        # 사전에 없는 대립유전자는 0번(가장 우성)으로 취급
        pair = sorted(allele_pair, key=lambda a: order.get(a, 0))
        return ''.join(pair)

    @staticmethod
    def punnett_outcomes(
        sire_alleles: Sequence[str],
        dam_alleles: Sequence[str],
        dominance_order: Sequence[str],
        weights: Dict[str, float]
    ) -> List[Outcome]:
        """
        퍼넷 사각형 4칸의 결과 (집계 전)
        roll1=(부0,모0), roll2=(부0,모1), roll3=(부1,모0), roll4=(부1,모1)
        """
        pairs = [
            (sire_alleles[0], dam_alleles[0]),
            (sire_alleles[0], dam_alleles[1]),
            (sire_alleles[1], dam_alleles[0]),
            (sire_alleles[1], dam_alleles[1]),
        ]
        cell_weights = [weights.get(key, DEFAULT_CELL_WEIGHT) for key in PUNNETT_KEYS]
        total = float(sum(cell_weights))
        if total <= 0:
            cell_weights = [DEFAULT_CELL_WEIGHT] * len(PUNNETT_KEYS)
            total = 100.0

        return [
            Outcome(
                genotype=GeneticsEngine.format_genotype(pair, dominance_order),
                probability=weight / total
            )
            for pair, weight in zip(pairs, cell_weights)
        ]

    @staticmethod
    def classify_percentage_parent(genotype: str, alleles: Sequence[str]) -> ParentClass:
        """퍼센트 유전자의 부모 유전자형 분류: AA -> dom, nA -> rec, 빈 값 -> none"""
        genotype = genotype.strip()
        if genotype == '':
            return ParentClass.NONE
        a = alleles[0]
        if genotype == a + a:
            return ParentClass.DOM
        if genotype == 'n' + a:
            return ParentClass.REC
        raise InvalidPercentageGenotypeError(genotype, a)

    @staticmethod
    def is_valid_percentage_genotype(genotype: str, alleles: Sequence[str]) -> bool:
        genotype = genotype.strip()
        if not alleles:
            return False
        a = alleles[0]
        return genotype in ('', a + a, 'n' + a)

    @staticmethod
    def percentage_outcome_to_genotype(label: str, alleles: Sequence[str]) -> str:
        """결과 라벨(dom/rec/none)을 유전자형 문자열로 변환"""
        a = alleles[0]
        if label == ParentClass.DOM.value:
            return a + a
        if label == ParentClass.REC.value:
            return 'n' + a
        if label == ParentClass.NONE.value:
            return ''
        raise InvalidOutcomeLabelError(label)

    @staticmethod
    def percentage_outcomes(
        sire_class: Union[ParentClass, str],
        dam_class: Union[ParentClass, str],
        alleles: Sequence[str],
        odds_table: Dict[str, Dict[str, float]]
    ) -> List[Outcome]:
        """
        퍼센트 유전자의 결과 목록
        확률표 키는 '부모분류X모분류' (예: 'recXrec'), 없으면 100% none
        """
        key = f"{_class_value(sire_class)}X{_class_value(dam_class)}"
        bands = odds_table.get(key, FALLBACK_PERCENTAGE_BAND)
        total = float(sum(bands.values()))
        if total <= 0:
            bands = FALLBACK_PERCENTAGE_BAND
            total = 100.0

        return [
            Outcome(
                genotype=GeneticsEngine.percentage_outcome_to_genotype(label, alleles),
                probability=weight / total
            )
            for label, weight in bands.items()
        ]


def _class_value(parent_class: Union[ParentClass, str]) -> str:
    if isinstance(parent_class, ParentClass):
        return parent_class.value
    return parent_class
