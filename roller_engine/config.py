"""
config.py - 롤러 설정 불러오기 / 저장
JSON 파일 또는 딕셔너리 레코드에서 Roller 생성
"""

import json
import os
from typing import Dict, Any, Optional

from .models import Roller
from .validator import validate_roller_record
from .errors import InvalidDictionaryError


def roller_from_dict(record: Dict[str, Any], source: Optional[str] = None) -> Roller:
    """검증 후 레코드에서 롤러 생성 (오류가 있으면 InvalidDictionaryError)"""
    report = validate_roller_record(record)
    if not report.is_valid:
        raise InvalidDictionaryError([e.message for e in report.get_errors()], source=source)
    return Roller.from_dict(record)


def load_roller(path: str) -> Roller:
    """JSON 파일에서 롤러 불러오기 (읽기 / JSON 오류도 InvalidDictionaryError)"""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            record = json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidDictionaryError([f"malformed JSON: {e}"], source=path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidDictionaryError([f"cannot read file: {e}"], source=path) from e
    if isinstance(record, dict) and not record.get('name'):
        # 이름이 없으면 파일 이름 사용
        record['name'] = os.path.splitext(os.path.basename(path))[0]
    return roller_from_dict(record, source=path)


def save_roller(roller: Roller, path: str):
    """롤러를 JSON 파일로 저장"""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(roller.to_dict(), f, ensure_ascii=False, indent=2)
