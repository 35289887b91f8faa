"""
Roller Engine - 교배 결과 확률 계산기
메인 실행 파일

사용법:
    python main.py --sire "Ee/Aa/nZ" --dam "ee aa"      # 기본 말(馬) 롤러
    python main.py --sire "..." --dam "..." --roller my_roller.json
    python main.py --sire "..." --dam "..." --top 5     # 상위 5개만 출력
    python main.py --sire "..." --dam "..." --save      # JSON 저장
"""

import argparse
import json
import os
import sys
from datetime import datetime
from typing import Optional, List

from roller_engine import (
    Roller, BreedingResult,
    BreedingCalculator,
    GeneticsError,
    load_roller,
    realistic_equine_roller
)


class RollerEngine:
    """
    Roller Engine 메인 클래스
    롤러 설정으로 교배 결과 계산 및 관리
    """

    def __init__(self, roller: Optional[Roller] = None):
        """
        Args:
            roller: 사용할 롤러 (None이면 기본 말 롤러)
        """
        self.roller = roller or realistic_equine_roller()
        self.calculator = BreedingCalculator()

    def roll(self, sire_text: str, dam_text: str) -> dict:
        """
        부모 유전자 문자열로 교배 결과 계산

        Args:
            sire_text: 부(父) 유전자 문자열 (예: 'Ee/Aa/nZ')
            dam_text: 모(母) 유전자 문자열

        Returns:
            결과 데이터 딕셔너리
        """
        dictionary = self.roller.dictionary

        try:
            sire = self.calculator.assign_parent('sire', sire_text, dictionary)
            dam = self.calculator.assign_parent('dam', dam_text, dictionary)
            outcomes = self.calculator.breeding_outcomes(sire, dam, dictionary, self.roller.odds)
        except GeneticsError as e:
            return {'success': False, 'error': e.to_dict()}

        return {
            'success': True,
            'timestamp': datetime.now().isoformat(),
            'roller': self.roller.slug,
            'genes': dictionary.names,
            'columns': self.calculator.contributing_genes(sire, dam, dictionary),
            'sire': sire,
            'dam': dam,
            'outcomes': [o.to_dict() for o in outcomes]
        }

    @staticmethod
    def to_markdown(columns: List[str], outcomes: List[BreedingResult]) -> str:
        """결과를 마크다운 표로 변환 (columns: 결과 유전자형에 포함된 유전자 이름)"""
        if not outcomes:
            return ""

        headers = list(columns) + ["%"]
        header_line = "| " + " | ".join(headers) + " |"
        separator = "|" + "|".join(["---"] * len(headers)) + "|"

        data_lines = []
        for outcome in outcomes:
            cells = [g if g else "-" for g in outcome.genotype] + [outcome.percentage]
            data_lines.append("| " + " | ".join(cells) + " |")

        return "\n".join([header_line, separator] + data_lines)

    def display_result(self, result: dict, top: Optional[int] = None):
        """결과를 콘솔에 표시"""
        if not result.get('success'):
            error = result.get('error', {})
            parent = error.get('context', {}).get('parent', '')
            print(f"❌ 오류 [{error.get('kind')}] {parent}: {error.get('message')}")
            return

        print(f"\n{'='*50}")
        print(f"🐴 {self.roller.name}")
        print(f"{'='*50}")
        print(f"부(sire): {' / '.join(g or '-' for g in result['sire'])}")
        print(f"모(dam):  {' / '.join(g or '-' for g in result['dam'])}")

        outcomes = [
            BreedingResult(o['genotype'], o['probability'], o['percentage'])
            for o in result['outcomes']
        ]
        if not outcomes:
            print("\n계산할 유전자가 없습니다.")
            return

        shown = outcomes[:top] if top else outcomes
        print(f"\n【결과】 {len(outcomes)}가지 조합")
        print(self.to_markdown(result['columns'], shown))

    def save_result(self, result: dict, output_dir: str = "output") -> Optional[str]:
        """결과를 JSON 파일로 저장"""
        if not result.get('success'):
            print("❌ 저장할 결과가 없습니다.")
            return None

        os.makedirs(output_dir, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        json_path = os.path.join(output_dir, f"roll_{self.roller.slug}_{timestamp}.json")
        with open(json_path, 'w', encoding='utf-8') as f:
            json.dump(result, f, ensure_ascii=False, indent=2)
        print(f"✓ JSON 저장: {json_path}")
        return json_path


def parse_args(argv: Optional[List[str]] = None):
    """명령줄 인자 파싱"""
    parser = argparse.ArgumentParser(
        description="Roller Engine - 교배 결과 확률 계산기"
    )

    parser.add_argument(
        '--sire',
        type=str,
        required=True,
        help="부(父) 유전자 문자열 ('/', ',', 공백으로 구분)"
    )

    parser.add_argument(
        '--dam',
        type=str,
        required=True,
        help="모(母) 유전자 문자열"
    )

    parser.add_argument(
        '--roller', '-r',
        type=str,
        default=None,
        help="롤러 JSON 파일 (기본: 내장 Realistic Equine)"
    )

    parser.add_argument(
        '--top', '-n',
        type=int,
        default=None,
        help="상위 N개 결과만 출력"
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        default='output',
        help="출력 디렉토리 (기본: output)"
    )

    parser.add_argument(
        '--save',
        action='store_true',
        help="결과를 파일로 저장"
    )

    parser.add_argument(
        '--no-display',
        action='store_true',
        help="콘솔 출력 생략"
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """메인 함수"""
    args = parse_args(argv)

    try:
        roller = load_roller(args.roller) if args.roller else None
    except GeneticsError as e:
        print(f"❌ 롤러 설정 오류: {e.message}")
        return 1

    engine = RollerEngine(roller)
    result = engine.roll(args.sire, args.dam)

    if not args.no_display:
        engine.display_result(result, top=args.top)

    if args.save:
        engine.save_result(result, args.output)

    return 0 if result.get('success') else 1


if __name__ == "__main__":
    sys.exit(main())
