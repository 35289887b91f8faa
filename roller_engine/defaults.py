"""
defaults.py - 기본 확률표와 기본 롤러
"""

from typing import Dict

from .models import GeneDictionary, GeneSpec, OddsConfig, OddsType, Roller


def default_punnett_odds() -> Dict[str, float]:
    """퍼넷 사각형 4칸 균등 가중치"""
    return {
        'roll1': 25,
        'roll2': 25,
        'roll3': 25,
        'roll4': 25,
    }


def default_percentage_odds() -> Dict[str, Dict[str, float]]:
    """퍼센트 유전 기본 확률표 (부모분류X모분류 -> 결과 가중치)"""
    return {
        'domXdom': {'dom': 100},
        'domXrec': {'dom': 100},
        'domXnone': {'rec': 50},
        'recXrec': {'dom': 50, 'rec': 50},
        'recXnone': {'rec': 50, 'none': 50},
        'noneXnone': {'none': 100},
    }


def default_odds() -> OddsConfig:
    return OddsConfig(
        punnett=default_punnett_odds(),
        percentage=default_percentage_odds()
    )


def realistic_equine_roller() -> Roller:
    """기본 제공 말(馬) 모색 롤러: black, agouti (퍼넷), silver (퍼센트)"""
    dictionary = GeneDictionary(genes=[
        GeneSpec('black', OddsType.PUNNETT, ['E', 'e']),
        GeneSpec('agouti', OddsType.PUNNETT, ['At', 'A', 'a']),
        GeneSpec('silver', OddsType.PERCENTAGE, ['Z']),
    ])
    return Roller(
        name='Realistic Equine',
        slug='realistic-equine',
        is_core=True,
        dictionary=dictionary,
        odds=default_odds()
    )
