import logging

from fastapi.testclient import TestClient
from sentences_api.main import app

client = TestClient(app)


def _create(text='Good morning.', difficulty='EASY', created='2024-01-15', translation='Günaydın.'):
    body = {'englishSentence': text, 'turkishTranslation': translation, 'difficulty': difficulty}
    if created is not None:
        body['createdDate'] = created
    r = client.post('/api/sentences', json=body)
    assert r.status_code == 200
    return r.json()


def test_create_get_update_delete_flow():
    created = _create(difficulty='medium')
    assert created['englishSentence'] == 'Good morning.'
    assert created['turkishTranslation'] == 'Günaydın.'
    assert created['difficulty'] == 'MEDIUM'
    assert created['createdDate'] == '2024-01-15'
    sid = created['id']

    r = client.get(f'/api/sentences/{sid}')
    assert r.status_code == 200
    assert r.json() == created

    r = client.put(f'/api/sentences/{sid}', json={'englishSentence': 'Good night.', 'turkishTranslation': 'İyi geceler.', 'difficulty': 'HARD'})
    assert r.status_code == 200
    assert r.json()['englishSentence'] == 'Good night.'
    assert r.json()['difficulty'] == 'HARD'
    assert client.get(f'/api/sentences/{sid}').json()['turkishTranslation'] == 'İyi geceler.'

    r = client.delete(f'/api/sentences/{sid}')
    assert r.status_code == 200
    assert r.content == b''
    assert client.get(f'/api/sentences/{sid}').status_code == 404
    assert client.delete(f'/api/sentences/{sid}').status_code == 404


def test_create_accepts_snake_case_and_defaults():
    r = client.post('/api/sentences', json={'english_sentence': 'Where is the station?'})
    assert r.status_code == 200
    body = r.json()
    assert body['difficulty'] == 'EASY'
    assert body['createdDate']
    assert body['turkishTranslation'] is None


def test_create_rejects_blank_sentence():
    r = client.post('/api/sentences', json={'englishSentence': '  ', 'difficulty': 'EASY'})
    assert r.status_code == 400


def test_unknown_ids_return_404():
    assert client.get('/api/sentences/9999').status_code == 404
    r = client.put('/api/sentences/9999', json={'englishSentence': 'Ghost.', 'difficulty': 'EASY'})
    assert r.status_code == 404
    assert client.get('/api/sentences').json() == []


def test_filter_by_difficulty():
    _create(text='Easy.', difficulty='EASY')
    medium = _create(text='Medium.', difficulty='MEDIUM')
    r = client.get('/api/sentences/difficulty/medium')
    assert r.status_code == 200
    assert [s['id'] for s in r.json()] == [medium['id']]
    assert client.get('/api/sentences/difficulty/bogus').status_code == 400


def test_filter_by_date_and_range():
    _create(text='December.', created='2023-12-31')
    jan1 = _create(text='New year.', created='2024-01-01')
    jan31 = _create(text='End of January.', created='2024-01-31')
    _create(text='February.', created='2024-02-01')

    r = client.get('/api/sentences/date/2024-01-01')
    assert r.status_code == 200
    assert [s['id'] for s in r.json()] == [jan1['id']]
    assert client.get('/api/sentences/date/01-01-2024').status_code == 400
    assert client.get('/api/sentences/date/2024-1-5').status_code == 400

    r = client.get('/api/sentences/date-range', params={'startDate': '2024-01-01', 'endDate': '2024-01-31'})
    assert r.status_code == 200
    assert {s['id'] for s in r.json()} == {jan1['id'], jan31['id']}
    r = client.get('/api/sentences/date-range', params={'startDate': '2024-01-01', 'endDate': 'later'})
    assert r.status_code == 400
    r = client.get('/api/sentences/date-range', params={'startDate': ' 2024-01-01', 'endDate': '2024-01-31'})
    assert r.status_code == 400

    dates = client.get('/api/sentences/dates').json()
    assert dates == ['2024-02-01', '2024-01-31', '2024-01-01', '2023-12-31']


def test_unified_listing_and_stats(add_word_sentences):
    easy = _create(text='Easy practice.', difficulty='EASY')
    _create(text='Hard practice.', difficulty='HARD')
    add_word_sentences(3)

    rows = client.get('/api/sentences').json()
    assert len(rows) == 5
    assert rows[0]['id'] == f"practice_{easy['id']}"
    assert [r['source'] for r in rows] == ['practice', 'practice', 'word', 'word', 'word']
    word_row = rows[2]
    assert word_row['id'].startswith('word_')
    assert word_row['difficulty'] == 'EASY'
    assert word_row['createdDate'] is None
    assert set(word_row) == {'id', 'englishSentence', 'turkishTranslation', 'difficulty', 'createdDate', 'source'}

    r = client.get('/api/sentences/stats')
    assert r.status_code == 200
    assert r.json() == {'total': 5, 'easy': 4, 'medium': 0, 'hard': 1}


def test_cors_allows_dev_frontend():
    r = client.options(
        '/api/sentences',
        headers={'Origin': 'http://localhost:5173', 'Access-Control-Request-Method': 'GET'},
    )
    assert r.status_code == 200
    assert r.headers['access-control-allow-origin'] == 'http://localhost:5173'


def test_request_id_header_exists():
    r = client.get('/health')
    assert r.status_code == 200
    assert r.json() == {'status': 'ok'}
    assert 'X-Request-ID' in r.headers
    r = client.get('/api/sentences/stats', headers={'X-Request-ID': 'abc123'})
    assert r.headers['X-Request-ID'] == 'abc123'


def test_malformed_requests_return_400():
    r = client.post('/api/sentences', json={'englishSentence': 'x', 'difficulty': 'bogus'})
    assert r.status_code == 400
    assert r.json()['detail']
    assert client.post('/api/sentences', json={'englishSentence': 'x', 'difficulty': None}).status_code == 400
    assert client.post('/api/sentences', json={'difficulty': 'EASY'}).status_code == 400
    assert client.get('/api/sentences/abc').status_code == 400
    assert client.put('/api/sentences/abc', json={'englishSentence': 'x'}).status_code == 400
    assert client.delete('/api/sentences/abc').status_code == 400
    assert client.get('/api/sentences').json() == []


def test_request_logging_covers_api_paths_only(caplog):
    caplog.set_level(logging.INFO, logger='sentences_api.api')
    client.get('/health')
    assert not [r for r in caplog.records if 'request_done' in r.getMessage()]
    client.get('/api/sentences/stats', headers={'X-Request-ID': 'log-check'})
    done = [r.getMessage() for r in caplog.records if 'request_done' in r.getMessage()]
    assert len(done) == 1
    assert '"request_id": "log-check"' in done[0]
    assert '"status_code": 200' in done[0]
