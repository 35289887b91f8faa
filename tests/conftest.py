"""
Pytest configuration and shared fixtures.
"""

import pytest

from roller_engine import (
    GeneSpec,
    GeneDictionary,
    OddsType,
    BreedingCalculator,
    default_odds,
    realistic_equine_roller,
)


@pytest.fixture
def equine_roller():
    """Built-in roller: black [E, e], agouti [At, A, a], silver [Z]."""
    return realistic_equine_roller()


@pytest.fixture
def equine_dictionary(equine_roller):
    return equine_roller.dictionary


@pytest.fixture
def odds():
    return default_odds()


@pytest.fixture
def black_silver_dictionary():
    return GeneDictionary(genes=[
        GeneSpec('black', OddsType.PUNNETT, ['E', 'e']),
        GeneSpec('silver', OddsType.PERCENTAGE, ['Z']),
    ])


@pytest.fixture
def calculator():
    return BreedingCalculator()


@pytest.fixture
def equine_record():
    """Plain roller record as it would be stored or posted."""
    return {
        'name': 'Realistic Equine',
        'slug': 'realistic-equine',
        'is_core': True,
        'dictionary': {
            'black': {'oddsType': 'punnett', 'alleles': ['E', 'e']},
            'agouti': {'oddsType': 'punnett', 'alleles': ['At', 'A', 'a']},
            'silver': {'oddsType': 'percentage', 'alleles': ['Z']},
        },
        'punnett_odds': {'roll1': 25, 'roll2': 25, 'roll3': 25, 'roll4': 25},
        'percentage_odds': {
            'domXdom': {'dom': 100},
            'domXrec': {'dom': 100},
            'domXnone': {'rec': 50},
            'recXrec': {'dom': 50, 'rec': 50},
            'recXnone': {'rec': 50, 'none': 50},
            'noneXnone': {'none': 100},
        },
        'phenos': [{'name': 'Bay', 'alleles': ['E', 'A']}],
    }
