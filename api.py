"""
Roller Engine - Flask REST API
교배 계산 엔진의 JSON 어댑터

실행: flask --app api run --debug
또는: python api.py
"""

from flask import Flask, jsonify, request
from flask_cors import CORS

from roller_engine import (
    BreedingCalculator,
    GeneticsError,
    roller_from_dict,
    realistic_equine_roller,
    validate_roller_record
)

app = Flask(__name__)
app.json.sort_keys = False  # 유전자 사전 순서 유지
CORS(app)  # CORS 활성화

# 전역 객체
calculator = BreedingCalculator()


@app.route('/')
def index():
    """API 정보"""
    return jsonify({
        'name': 'Roller Engine API',
        'version': '1.0.0',
        'description': '교배 결과 확률 계산 API',
        'endpoints': {
            '/roller': 'GET - 기본 롤러 설정',
            '/roll': 'POST - 교배 결과 계산',
            '/validate': 'POST - 롤러 설정 검증'
        }
    })


@app.route('/roller', methods=['GET'])
def get_roller():
    """기본 롤러 설정"""
    return jsonify({'roller': realistic_equine_roller().to_dict()})


@app.route('/roll', methods=['POST'])
def roll():
    """
    교배 결과 계산

    Request Body:
    {
        "sire_genes": "Ee/Aa/nZ",   // 부(父) 유전자 문자열
        "dam_genes": "ee aa",       // 모(母) 유전자 문자열
        "roller": null              // 롤러 레코드 (선택, 없으면 기본 롤러)
    }
    """
    data = request.get_json(silent=True) or {}

    missing = [
        name for name in ('sire_genes', 'dam_genes')
        if not isinstance(data.get(name), str) or not data[name].strip()
    ]
    if missing:
        return jsonify({
            'success': False,
            'errors': {name: ['This field is required.'] for name in missing}
        }), 400

    try:
        if data.get('roller'):
            roller = roller_from_dict(data['roller'])
        else:
            roller = realistic_equine_roller()

        sire = calculator.assign_parent('sire', data['sire_genes'], roller.dictionary)
        dam = calculator.assign_parent('dam', data['dam_genes'], roller.dictionary)
        outcomes = calculator.breeding_outcomes(sire, dam, roller.dictionary, roller.odds)

    except GeneticsError as e:
        parent = e.context.get('parent')
        field = f"{parent}_genes" if parent else 'roller'
        return jsonify({
            'success': False,
            'errors': {field: [e.message]},
            'error': e.to_dict()
        }), 422

    except Exception as e:
        return jsonify({
            'success': False,
            'error': str(e)
        }), 500

    return jsonify({
        'success': True,
        'roller': roller.slug,
        'genes': roller.dictionary.names,
        'columns': calculator.contributing_genes(sire, dam, roller.dictionary),
        'sire': sire,
        'dam': dam,
        'outcomes': [o.to_dict() for o in outcomes]
    })


@app.route('/validate', methods=['POST'])
def validate():
    """
    롤러 레코드 검증

    Request Body:
    {
        "dictionary": {...},        // 유전자 사전
        "punnett_odds": {...},      // 퍼넷 확률표 (선택)
        "percentage_odds": {...}    // 퍼센트 확률표 (선택)
    }
    """
    data = request.get_json(silent=True)
    report = validate_roller_record(data)
    return jsonify({
        'success': report.is_valid,
        'validation': report.to_dict()
    }), 200 if report.is_valid else 422


if __name__ == '__main__':
    print("=" * 50)
    print("Roller Engine API Server")
    print("=" * 50)
    print("Server starting at http://localhost:5000")
    print()
    app.run(debug=True, host='0.0.0.0', port=5000)
