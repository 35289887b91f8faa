"""
validator.py - 롤러 설정 검증 모듈
유전자 사전, 확률표, 표현형 레코드의 형식 검증
"""

from typing import List, Dict, Any
from dataclasses import dataclass, field
from enum import Enum

from .models import OddsType, ParentClass, PUNNETT_KEYS


MAX_ALLELE_LENGTH = 64
MAX_PHENO_NAME_LENGTH = 255
PARENT_CLASSES = [c.value for c in ParentClass]
ODDS_TYPES = [t.value for t in OddsType]


class ValidationLevel(Enum):
    """문제 수준"""
    ERROR = "ERROR"      # 사용할 수 없는 설정
    WARNING = "WARNING"  # 사용 가능하지만 의심스러운 설정


@dataclass
class ValidationResult:
    """
    검증에서 발견된 문제 하나
    - path: 문제가 된 레코드 위치 (예: 'dictionary.silver.alleles')
    """
    level: ValidationLevel
    path: str
    message: str
    details: Dict = field(default_factory=dict)

    def to_dict(self) -> Dict:
        return {
            'level': self.level.value,
            'path': self.path,
            'message': self.message,
            'details': self.details
        }

    def __str__(self):
        return f"{self.level.value} {self.path}: {self.message}"


@dataclass
class ValidationReport:
    """롤러 레코드 검증 결과 (문제가 없으면 results가 비어 있음)"""
    results: List[ValidationResult] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.get_errors()

    @property
    def error_count(self) -> int:
        return len(self.get_errors())

    @property
    def warning_count(self) -> int:
        return len(self.get_warnings())

    def error(self, path: str, message: str, **details):
        self.results.append(ValidationResult(ValidationLevel.ERROR, path, message, details))

    def warning(self, path: str, message: str, **details):
        self.results.append(ValidationResult(ValidationLevel.WARNING, path, message, details))

    def get_errors(self) -> List[ValidationResult]:
        return [r for r in self.results if r.level == ValidationLevel.ERROR]

    def get_warnings(self) -> List[ValidationResult]:
        return [r for r in self.results if r.level == ValidationLevel.WARNING]

    def to_dict(self) -> Dict:
        return {
            'is_valid': self.is_valid,
            'error_count': self.error_count,
            'warning_count': self.warning_count,
            'results': [r.to_dict() for r in self.results]
        }

    def __str__(self):
        if not self.results:
            return "롤러 설정: 문제 없음"
        header = f"롤러 설정: 오류 {self.error_count}, 경고 {self.warning_count}"
        return "\n".join([header] + [f"  - {r}" for r in self.results])


class RollerValidator:
    """
    롤러 레코드 검증 클래스

    검증 항목:
    1. 유전자 사전 형식 (oddsType, alleles)
    2. 퍼센트 유전자는 대립유전자 정확히 1개
    3. 퍼넷 확률표 (roll1..roll4, 음수 불가)
    4. 퍼센트 확률표 (키 형식, 결과 라벨, 음수 불가)
    5. 표현형 목록 (name, alleles)
    """

    def validate_record(self, record: Dict[str, Any]) -> ValidationReport:
        """
        롤러 레코드 전체 검증

        Args:
            record: {'name', 'dictionary', 'punnett_odds', 'percentage_odds', 'phenos', ...}

        Returns:
            ValidationReport 객체
        """
        report = ValidationReport()

        if not isinstance(record, dict):
            report.error('', "Roller record must be a mapping.")
            return report

        self._validate_dictionary(record.get('dictionary'), report)
        self._validate_punnett_odds(record.get('punnett_odds') or {}, report)
        self._validate_percentage_odds(record.get('percentage_odds') or {}, report)
        self._validate_phenos(record.get('phenos') or [], report)

        return report

    def _validate_dictionary(self, dictionary: Any, report: ValidationReport):
        """유전자 사전 검증"""
        if not isinstance(dictionary, dict) or not dictionary:
            report.error('dictionary', "dictionary must be a non-empty mapping.")
            return

        for name, entry in dictionary.items():
            path = f"dictionary.{name}"
            if not isinstance(entry, dict):
                report.error(path, f"{path} must be a mapping.")
                continue

            odds_type = entry.get('oddsType')
            if odds_type == 'base':
                report.warning(f"{path}.oddsType", f"{path}.oddsType 'base' is deprecated, use 'punnett'.")
            elif odds_type not in ODDS_TYPES:
                report.error(
                    f"{path}.oddsType",
                    f"{path}.oddsType must be one of {', '.join(ODDS_TYPES)}.",
                    value=odds_type
                )

            alleles = entry.get('alleles')
            if not self._check_alleles(alleles, f"{path}.alleles", report):
                continue

            if odds_type == OddsType.PERCENTAGE.value and len(alleles) != 1:
                report.error(f"{path}.alleles", "Percentage genes must have exactly one allele.", gene=name)

            strings = [a for a in alleles if isinstance(a, str)]
            if len(set(strings)) != len(strings):
                report.warning(f"{path}.alleles", f"{path}.alleles contains duplicates.", gene=name)

    def _validate_punnett_odds(self, odds: Any, report: ValidationReport):
        """퍼넷 확률표 검증"""
        if not isinstance(odds, dict):
            report.error('punnett_odds', "punnett_odds must be a mapping.")
            return

        for key, weight in odds.items():
            path = f"punnett_odds.{key}"
            if key not in PUNNETT_KEYS:
                report.error(path, f"{path} is not a Punnett cell (roll1..roll4).")
            elif not _is_weight(weight):
                report.error(path, f"{path} must be a non-negative number.", value=weight)

    def _validate_percentage_odds(self, odds: Any, report: ValidationReport):
        """퍼센트 확률표 검증"""
        if not isinstance(odds, dict):
            report.error('percentage_odds', "percentage_odds must be a mapping.")
            return

        valid_keys = {f"{s}X{d}" for s in PARENT_CLASSES for d in PARENT_CLASSES}
        for key, bands in odds.items():
            path = f"percentage_odds.{key}"
            if key not in valid_keys:
                report.error(path, f"{path} is not a parent class pair (e.g. domXrec).")
                continue
            if not isinstance(bands, dict):
                report.error(path, f"{path} must be a mapping of outcome to weight.")
                continue
            for label, weight in bands.items():
                if label not in PARENT_CLASSES:
                    report.error(f"{path}.{label}", f"{path}.{label} is not an outcome (dom, rec, none).")
                elif not _is_weight(weight):
                    report.error(f"{path}.{label}", f"{path}.{label} must be a non-negative number.",
                                 value=weight)

    def _validate_phenos(self, phenos: Any, report: ValidationReport):
        """표현형 목록 검증 (계산에는 쓰이지 않지만 저장 전 형식 확인)"""
        if not isinstance(phenos, list):
            report.error('phenos', "phenos must be a list.")
            return

        for i, pheno in enumerate(phenos):
            path = f"phenos.{i}"
            if not isinstance(pheno, dict):
                report.error(path, f"{path} must be a mapping.")
                continue

            name = pheno.get('name')
            if not isinstance(name, str) or name == '':
                report.error(f"{path}.name", f"{path}.name must be a non-empty string.")
            elif len(name) > MAX_PHENO_NAME_LENGTH:
                report.error(
                    f"{path}.name",
                    f"{path}.name may not be longer than {MAX_PHENO_NAME_LENGTH} characters."
                )

            self._check_alleles(pheno.get('alleles'), f"{path}.alleles", report)

    def _check_alleles(self, alleles: Any, path: str, report: ValidationReport) -> bool:
        """대립유전자 목록 형식 확인 (목록 자체가 잘못되면 False)"""
        if not isinstance(alleles, list) or not alleles:
            report.error(path, f"{path} must be a non-empty list.")
            return False

        for i, allele in enumerate(alleles):
            if not isinstance(allele, str) or allele == '':
                report.error(f"{path}.{i}", f"{path}.{i} must be a non-empty string.")
            elif len(allele) > MAX_ALLELE_LENGTH:
                report.error(
                    f"{path}.{i}",
                    f"{path}.{i} may not be longer than {MAX_ALLELE_LENGTH} characters."
                )
        return True


def _is_weight(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value >= 0


def validate_roller_record(record: Dict[str, Any]) -> ValidationReport:
    """편의 함수"""
    return RollerValidator().validate_record(record)
