"""
models.py - 핵심 데이터 모델 정의
GeneSpec, GeneDictionary, OddsConfig, Outcome, BreedingResult, Roller 클래스
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Dict, Iterator, Any


class OddsType(Enum):
    """유전 방식 (확률 계산 방식)"""
    PUNNETT = "punnett"        # 퍼넷 사각형 (멘델 유전)
    PERCENTAGE = "percentage"  # 퍼센트 구간 (dom/rec/none)

    @classmethod
    def from_value(cls, value: str) -> 'OddsType':
        """레코드 문자열에서 변환 ('base'는 이전 이름)"""
        if value == "base":
            return cls.PUNNETT
        return cls(value)


class ParentClass(Enum):
    """퍼센트 유전자의 부모 분류"""
    DOM = "dom"    # AA
    REC = "rec"    # nA
    NONE = "none"  # 없음 (빈 문자열)


PUNNETT_KEYS = ('roll1', 'roll2', 'roll3', 'roll4')


@dataclass
class GeneSpec:
    """
    유전자 정의
    - name: 유전자 이름 (예: 'black')
    - odds_type: 유전 방식
    - alleles: 대립유전자 목록 (우성 순서, 앞쪽이 더 우성)
    """
    name: str
    odds_type: OddsType
    alleles: List[str]

    @property
    def is_punnett(self) -> bool:
        return self.odds_type == OddsType.PUNNETT

    @property
    def is_percentage(self) -> bool:
        return self.odds_type == OddsType.PERCENTAGE

    def to_dict(self) -> Dict[str, Any]:
        return {
            'oddsType': self.odds_type.value,
            'alleles': list(self.alleles)
        }


@dataclass
class GeneDictionary:
    """
    유전자 사전 - 순서가 있는 유전자 목록
    순서가 결과 유전자형 튜플의 순서와 정렬 우선순위를 결정함
    """
    genes: List[GeneSpec] = field(default_factory=list)

    def __post_init__(self):
        seen = set()
        for gene in self.genes:
            if gene.name in seen:
                raise ValueError(f"중복된 유전자 이름: {gene.name}")
            seen.add(gene.name)

    def __iter__(self) -> Iterator[GeneSpec]:
        return iter(self.genes)

    def __len__(self) -> int:
        return len(self.genes)

    @property
    def names(self) -> List[str]:
        return [g.name for g in self.genes]

    @property
    def punnett_genes(self) -> List[GeneSpec]:
        return [g for g in self.genes if g.is_punnett]

    @property
    def percentage_genes(self) -> List[GeneSpec]:
        return [g for g in self.genes if g.is_percentage]

    def get(self, name: str) -> Optional[GeneSpec]:
        """이름으로 유전자 조회"""
        for gene in self.genes:
            if gene.name == name:
                return gene
        return None

    @classmethod
    def from_dict(cls, data: Dict[str, Dict[str, Any]]) -> 'GeneDictionary':
        """{이름: {'oddsType': ..., 'alleles': [...]}} 형식에서 생성"""
        genes = [
            GeneSpec(
                name=name,
                odds_type=OddsType.from_value(entry.get('oddsType', '')),
                alleles=[str(a) for a in entry.get('alleles', [])]
            )
            for name, entry in data.items()
        ]
        return cls(genes=genes)

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return {g.name: g.to_dict() for g in self.genes}


@dataclass
class OddsConfig:
    """
    확률 설정
    - punnett: 퍼넷 사각형 4칸 가중치 (roll1..roll4)
    - percentage: 부모 분류 쌍('domXrec' 등) -> {결과 라벨: 가중치}
    """
    punnett: Dict[str, float] = field(default_factory=dict)
    percentage: Dict[str, Dict[str, float]] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'OddsConfig':
        return cls(
            punnett=dict(data.get('punnett') or {}),
            percentage={
                key: dict(bands)
                for key, bands in (data.get('percentage') or {}).items()
            }
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'punnett': dict(self.punnett),
            'percentage': {k: dict(v) for k, v in self.percentage.items()}
        }


@dataclass
class Outcome:
    """한 유전자에 대한 가능한 결과 하나"""
    genotype: str
    probability: float


@dataclass
class BreedingResult:
    """교배 결과 한 행 (유전자형 조합 + 확률)"""
    genotype: List[str]
    probability: float
    percentage: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'genotype': list(self.genotype),
            'probability': self.probability,
            'percentage': self.percentage
        }


def slugify(name: str) -> str:
    """이름을 URL용 슬러그로 변환 ('Realistic Equine' -> 'realistic-equine')"""
    slug = re.sub(r'[^a-z0-9]+', '-', name.lower())
    return slug.strip('-')


@dataclass
class Roller:
    """
    롤러 - 유전자 사전과 확률 설정을 묶은 이름 있는 설정
    - phenos: 표현형 정의 목록 ('name', 'alleles'), 계산에는 쓰이지 않고 보존만 함
    """
    name: str
    dictionary: GeneDictionary
    odds: OddsConfig = field(default_factory=OddsConfig)
    slug: Optional[str] = None
    is_core: bool = False
    phenos: List[Dict[str, Any]] = field(default_factory=list)

    def __post_init__(self):
        if not self.slug:
            self.slug = slugify(self.name)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Roller':
        return cls(
            name=data.get('name', ''),
            slug=data.get('slug'),
            is_core=bool(data.get('is_core', False)),
            dictionary=GeneDictionary.from_dict(data.get('dictionary') or {}),
            odds=OddsConfig(
                punnett=dict(data.get('punnett_odds') or {}),
                percentage={
                    key: dict(bands)
                    for key, bands in (data.get('percentage_odds') or {}).items()
                }
            ),
            phenos=[dict(p) for p in (data.get('phenos') or [])]
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'slug': self.slug,
            'is_core': self.is_core,
            'dictionary': self.dictionary.to_dict(),
            'punnett_odds': dict(self.odds.punnett),
            'percentage_odds': {k: dict(v) for k, v in self.odds.percentage.items()},
            'phenos': [dict(p) for p in self.phenos]
        }

    def __repr__(self):
        return f"Roller({self.slug}, genes={self.dictionary.names})"
