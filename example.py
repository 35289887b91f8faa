"""
Roller Engine - 사용 예시
다양한 교배 계산 시나리오
"""

from roller_engine import (
    GeneSpec, GeneDictionary, OddsConfig, OddsType, Roller,
    GeneticsEngine, BreedingCalculator,
    assign_tokens_to_genes, split_gene_string,
    default_odds, realistic_equine_roller,
    GeneticsError
)


def print_outcomes(outcomes, limit=None):
    for outcome in outcomes[:limit]:
        genotype = " / ".join(g or "-" for g in outcome.genotype)
        print(f"  {genotype:<20} {outcome.percentage:>6}%")


def example_1_single_gene():
    """
    예시 1: 단일 퍼넷 유전자 (Ee x Ee)
    - EE 25%, Ee 50%, ee 25%
    """
    print("\n" + "="*60)
    print("예시 1: 단일 퍼넷 유전자")
    print("="*60)

    dictionary = GeneDictionary(genes=[
        GeneSpec('black', OddsType.PUNNETT, ['E', 'e'])
    ])

    calculator = BreedingCalculator()
    outcomes = calculator.breeding_outcomes(['Ee'], ['Ee'], dictionary, default_odds())
    print_outcomes(outcomes)


def example_2_mixed_genes():
    """
    예시 2: 퍼넷 + 퍼센트 유전자
    - black (Ee x Ee) 와 silver (nZ x nZ) 조합 6가지
    """
    print("\n" + "="*60)
    print("예시 2: 퍼넷 + 퍼센트 유전자")
    print("="*60)

    dictionary = GeneDictionary(genes=[
        GeneSpec('black', OddsType.PUNNETT, ['E', 'e']),
        GeneSpec('silver', OddsType.PERCENTAGE, ['Z']),
    ])

    calculator = BreedingCalculator()
    outcomes = calculator.breeding_outcomes(
        ['Ee', 'nZ'], ['Ee', 'nZ'], dictionary, default_odds()
    )
    print_outcomes(outcomes)
    print(f"  합계: {sum(o.probability for o in outcomes):.6f}")


def example_3_free_text():
    """
    예시 3: 자유 입력 (순서 무관)
    - 'aa, nZ / ee' 처럼 순서가 섞여도 사전 순서로 배정
    """
    print("\n" + "="*60)
    print("예시 3: 자유 입력 유전자 문자열")
    print("="*60)

    roller = realistic_equine_roller()
    tokens = split_gene_string("aa, nZ / ee")
    print(f"  토큰: {tokens}")
    print(f"  배정: {assign_tokens_to_genes(tokens, roller.dictionary)}")

    outcomes = BreedingCalculator().roll("EE AtA ZZ", "aa, nZ / ee", roller)
    print_outcomes(outcomes, limit=5)


def example_4_custom_odds():
    """
    예시 4: 사용자 정의 확률표
    - roll1, roll4만 사용하는 치우친 퍼넷 가중치
    """
    print("\n" + "="*60)
    print("예시 4: 사용자 정의 확률")
    print("="*60)

    roller = Roller(
        name='Skewed Black',
        dictionary=GeneDictionary(genes=[
            GeneSpec('black', OddsType.PUNNETT, ['E', 'e'])
        ]),
        odds=OddsConfig(punnett={'roll1': 50, 'roll2': 0, 'roll3': 0, 'roll4': 50})
    )

    print_outcomes(BreedingCalculator().roll("Ee", "ee", roller))


def example_5_errors():
    """
    예시 5: 오류 처리
    - 오류 종류와 문맥 정보 확인
    """
    print("\n" + "="*60)
    print("예시 5: 오류 처리")
    print("="*60)

    try:
        GeneticsEngine.parse_genotype('Xy', ['E', 'e'])
    except GeneticsError as e:
        print(f"  {e.kind.value}: {e.context}")

    try:
        BreedingCalculator().roll("Ee", "Ee AtA", realistic_equine_roller())
    except GeneticsError as e:
        print(f"  {e.kind.value}: {e.context}")


if __name__ == "__main__":
    example_1_single_gene()
    example_2_mixed_genes()
    example_3_free_text()
    example_4_custom_odds()
    example_5_errors()
