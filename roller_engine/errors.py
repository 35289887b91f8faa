"""
errors.py - 유전 엔진 오류 정의
오류 종류(ErrorKind)와 구조화된 문맥(context)을 가진 예외 클래스
"""

from enum import Enum
from typing import Dict, Any, List, Optional


class ErrorKind(Enum):
    """오류 종류"""
    EMPTY_GENOTYPE = "empty_genotype"
    UNPARSEABLE_GENOTYPE = "unparseable_genotype"
    INVALID_PERCENTAGE_GENOTYPE = "invalid_percentage_genotype"
    INVALID_OUTCOME_LABEL = "invalid_outcome_label"
    INSUFFICIENT_TOKENS = "insufficient_tokens"
    UNASSIGNABLE_GENE = "unassignable_gene"
    INVALID_DICTIONARY = "invalid_dictionary"


class GeneticsError(ValueError):
    """
    유전 엔진 오류의 기본 클래스
    - kind: 오류 종류
    - context: 유전자 이름, 문제 문자열, 대립유전자 등 구조화된 정보
    """
    kind: ErrorKind = None

    def __init__(self, message: str, **context):
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = context

    def to_dict(self) -> Dict[str, Any]:
        return {
            'kind': self.kind.value,
            'message': self.message,
            'context': self.context
        }


class EmptyGenotypeError(GeneticsError):
    kind = ErrorKind.EMPTY_GENOTYPE

    def __init__(self):
        super().__init__("Genotype cannot be empty.")


class UnparseableGenotypeError(GeneticsError):
    kind = ErrorKind.UNPARSEABLE_GENOTYPE

    def __init__(self, genotype: str, alleles: List[str]):
        super().__init__(
            f'Genotype "{genotype}" does not match two alleles from [{", ".join(alleles)}].',
            genotype=genotype,
            alleles=list(alleles)
        )


class InvalidPercentageGenotypeError(GeneticsError):
    kind = ErrorKind.INVALID_PERCENTAGE_GENOTYPE

    def __init__(self, genotype: str, allele: str):
        super().__init__(
            f'Genotype "{genotype}" is not valid for percentage gene '
            f'(expected {allele}{allele}, n{allele}, or empty).',
            genotype=genotype,
            alleles=[allele]
        )


class InvalidOutcomeLabelError(GeneticsError):
    kind = ErrorKind.INVALID_OUTCOME_LABEL

    def __init__(self, label: str):
        super().__init__(f"Invalid percentage outcome: {label}.", label=label)


class InsufficientTokensError(GeneticsError):
    kind = ErrorKind.INSUFFICIENT_TOKENS

    def __init__(self, genes: List[str], supplied: int):
        super().__init__(
            f"Not enough gene values: need {len(genes)} "
            f"(for {', '.join(genes)}), got {supplied}.",
            genes=list(genes),
            required=len(genes),
            supplied=supplied
        )


class UnassignableGeneError(GeneticsError):
    kind = ErrorKind.UNASSIGNABLE_GENE

    def __init__(self, gene: str, alleles: List[str]):
        super().__init__(
            f'No valid value for gene "{gene}" '
            f'(expected two alleles from [{", ".join(alleles)}]).',
            gene=gene,
            alleles=list(alleles)
        )


class InvalidDictionaryError(GeneticsError):
    kind = ErrorKind.INVALID_DICTIONARY

    def __init__(self, errors: List[str], source: Optional[str] = None):
        message = "Invalid roller record: " + "; ".join(errors)
        if source:
            message = f"{source}: {message}"
        super().__init__(message, errors=list(errors), source=source)
