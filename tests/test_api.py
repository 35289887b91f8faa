"""Tests for the Flask JSON adapter."""

import pytest

from api import app


@pytest.fixture
def client():
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


def test_index(client):
    rv = client.get('/')
    assert rv.status_code == 200
    assert '/roll' in rv.get_json()['endpoints']


def test_default_roller(client):
    rv = client.get('/roller')
    data = rv.get_json()
    assert data['roller']['slug'] == 'realistic-equine'
    assert list(data['roller']['dictionary']) == ['black', 'agouti', 'silver']


def test_roll_with_default_roller(client):
    rv = client.post('/roll', json={'sire_genes': 'Ee/Aa/nZ', 'dam_genes': 'aa ee'})

    assert rv.status_code == 200
    data = rv.get_json()
    assert data['success'] is True
    assert data['sire'] == ['Ee', 'Aa', 'nZ']
    assert data['dam'] == ['ee', 'aa', '']
    assert data['columns'] == ['black', 'agouti', 'silver']
    assert len(data['outcomes']) == 8
    for outcome in data['outcomes']:
        assert outcome['genotype'][2] in ('nZ', '')
        assert outcome['percentage'] == '12.5'
    assert sum(o['probability'] for o in data['outcomes']) == pytest.approx(1.0)


def test_roll_with_posted_roller(client, equine_record):
    equine_record['punnett_odds'] = {'roll1': 100, 'roll2': 0, 'roll3': 0, 'roll4': 0}

    rv = client.post('/roll', json={
        'sire_genes': 'Ee Aa',
        'dam_genes': 'ee aa',
        'roller': equine_record,
    })

    data = rv.get_json()
    assert rv.status_code == 200
    assert data['outcomes'][0] == {'genotype': ['Ee', 'Aa', ''], 'probability': 1.0, 'percentage': '100'}
    # zero-weight cells still produce rows
    assert len(data['outcomes']) == 4
    assert [o['percentage'] for o in data['outcomes'][1:]] == ['0', '0', '0']


def test_roll_requires_both_parents(client):
    rv = client.post('/roll', json={'sire_genes': 'Ee Aa', 'dam_genes': '  '})

    assert rv.status_code == 400
    assert list(rv.get_json()['errors']) == ['dam_genes']


def test_roll_reports_error_on_parent_field(client):
    rv = client.post('/roll', json={'sire_genes': 'Ee Aa', 'dam_genes': 'ee'})

    assert rv.status_code == 422
    data = rv.get_json()
    assert 'dam_genes' in data['errors']
    assert data['error']['kind'] == 'insufficient_tokens'


def test_roll_rejects_invalid_roller(client, equine_record):
    equine_record['dictionary']['silver']['oddsType'] = 'mendel'

    rv = client.post('/roll', json={
        'sire_genes': 'Ee Aa',
        'dam_genes': 'ee aa',
        'roller': equine_record,
    })

    assert rv.status_code == 422
    assert 'roller' in rv.get_json()['errors']


def test_validate(client, equine_record):
    rv = client.post('/validate', json=equine_record)
    assert rv.status_code == 200
    assert rv.get_json()['validation']['is_valid'] is True

    equine_record['dictionary']['silver']['alleles'] = ['Z', 'W']
    rv = client.post('/validate', json=equine_record)
    assert rv.status_code == 422
    assert rv.get_json()['validation']['error_count'] == 1
