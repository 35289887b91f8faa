"""
Roller Engine - 교배 결과 확률 계산기

두 부모의 유전자형과 유전자 사전으로 자손 유전자형 분포를 계산하는 엔진
"""

from .models import (
    OddsType,
    ParentClass,
    GeneSpec,
    GeneDictionary,
    OddsConfig,
    Outcome,
    BreedingResult,
    Roller
)

from .errors import (
    ErrorKind,
    GeneticsError,
    EmptyGenotypeError,
    UnparseableGenotypeError,
    InvalidPercentageGenotypeError,
    InvalidOutcomeLabelError,
    InsufficientTokensError,
    UnassignableGeneError,
    InvalidDictionaryError
)

from .genetics import GeneticsEngine

from .assignment import (
    split_gene_string,
    assign_tokens_to_genes
)

from .breeding import (
    BreedingCalculator,
    format_percentage
)

from .defaults import (
    default_punnett_odds,
    default_percentage_odds,
    default_odds,
    realistic_equine_roller
)

from .validator import (
    ValidationLevel,
    ValidationReport,
    RollerValidator,
    validate_roller_record
)

from .config import (
    roller_from_dict,
    load_roller,
    save_roller
)


__version__ = "1.0.0"
__all__ = [
    # Models
    "OddsType",
    "ParentClass",
    "GeneSpec",
    "GeneDictionary",
    "OddsConfig",
    "Outcome",
    "BreedingResult",
    "Roller",

    # Errors
    "ErrorKind",
    "GeneticsError",
    "EmptyGenotypeError",
    "UnparseableGenotypeError",
    "InvalidPercentageGenotypeError",
    "InvalidOutcomeLabelError",
    "InsufficientTokensError",
    "UnassignableGeneError",
    "InvalidDictionaryError",

    # Genetics
    "GeneticsEngine",

    # Assignment
    "split_gene_string",
    "assign_tokens_to_genes",

    # Breeding
    "BreedingCalculator",
    "format_percentage",

    # Defaults
    "default_punnett_odds",
    "default_percentage_odds",
    "default_odds",
    "realistic_equine_roller",

    # Validator
    "ValidationLevel",
    "ValidationReport",
    "RollerValidator",
    "validate_roller_record",

    # Config
    "roller_from_dict",
    "load_roller",
    "save_roller",
]
