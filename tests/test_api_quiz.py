import time

import pytest


@pytest.fixture
def server_behind_utc(monkeypatch):
    if not hasattr(time, 'tzset'):
        pytest.skip('process time zone cannot be changed on this platform')
    monkeypatch.setenv('TZ', 'America/New_York')
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


def _answers(*categories):
    return [
        {'questionId': f'q{index}', 'answerIndex': index % 4, 'category': category}
        for index, category in enumerate(categories, start=1)
    ]


def test_submit_quiz(client, user):
    response = client.post('/api/quiz/submit', json={
        'userId': user['id'],
        'responses': _answers('cognitive', 'physical', 'digital'),
    })
    assert response.status_code == 201
    body = response.json()
    assert body['result']['balanceScore'] == 3
    assert body['result']['moodResult'] == 'Overloaded'
    assert body['result']['cognitiveScore'] == 1
    assert len(body['responses']) == 3
    assert {item['createdAt'] for item in body['responses']} == {body['result']['createdAt']}

    stored = client.get('/api/quiz-responses', params={'userId': user['id']}).json()
    assert [item['questionId'] for item in stored] == ['q1', 'q2', 'q3']


def test_submit_quiz_balanced(client, user):
    response = client.post('/api/quiz/submit', json={
        'userId': user['id'],
        'responses': _answers(*(['cognitive'] * 5 + ['physical'] * 5 + ['digital'] * 5)),
    })
    assert response.json()['result']['moodResult'] == 'Balanced'


def test_submit_quiz_requires_responses(client, user):
    response = client.post('/api/quiz/submit', json={'userId': user['id'], 'responses': []})
    assert response.status_code == 400
    assert response.json()['code'] == 'INVALID_RESPONSES'

    response = client.post('/api/quiz/submit', json={'responses': _answers('cognitive')})
    assert response.status_code == 400
    assert response.json()['code'] == 'MISSING_USER_ID'


def test_submit_quiz_unknown_user(client):
    response = client.post('/api/quiz/submit', json={'userId': 404, 'responses': _answers('digital')})
    assert response.status_code == 404
    assert response.json()['code'] == 'USER_NOT_FOUND'
    assert client.get('/api/quiz-results', params={'userId': 404}).json() == []


def test_invalid_answer_rejects_whole_batch(client, user):
    answers = _answers('cognitive', 'physical', 'digital')
    answers[1]['answerIndex'] = -1
    response = client.post('/api/quiz/submit', json={'userId': user['id'], 'responses': answers})
    assert response.status_code == 400
    assert response.json()['code'] == 'INVALID_ANSWER_INDEX'

    answers = _answers('cognitive', 'physical', 'digital')
    answers[1]['category'] = '  '
    response = client.post('/api/quiz/submit', json={'userId': user['id'], 'responses': answers})
    assert response.status_code == 400
    assert response.json()['code'] == 'MISSING_CATEGORY'

    assert client.get('/api/quiz-responses', params={'userId': user['id']}).json() == []
    assert client.get('/api/quiz-results', params={'userId': user['id']}).json() == []


def test_submission_is_latest_result_after_direct_result(client, user, server_behind_utc):
    client.post('/api/family-members', json={'familyGroupId': 'g', 'userId': user['id']})
    response = client.post('/api/quiz-results', json={
        'userId': user['id'], 'balanceScore': 9, 'moodResult': 'Needs Attention',
        'cognitiveScore': 3, 'physicalScore': 3, 'digitalScore': 3,
    })
    assert response.status_code == 201

    response = client.post('/api/quiz/submit', json={'userId': user['id'], 'responses': _answers('digital')})
    assert response.status_code == 201

    member = client.get('/api/family/g/members').json()['members'][0]
    assert member['progress']['lastQuizResult']['balanceScore'] == 1
    assert member['progress']['lastQuizResult']['moodResult'] == 'Overloaded'


def test_quiz_result_crud(client, user):
    response = client.post('/api/quiz-results', json={
        'userId': user['id'], 'balanceScore': 9, 'moodResult': 'Needs Attention',
        'cognitiveScore': 3, 'physicalScore': 3, 'digitalScore': 3,
    })
    assert response.status_code == 201
    result = response.json()

    response = client.post('/api/quiz-results', json={
        'userId': user['id'], 'balanceScore': 9, 'moodResult': 'Happy',
        'cognitiveScore': 3, 'physicalScore': 3, 'digitalScore': 3,
    })
    assert response.status_code == 400
    assert response.json()['code'] == 'INVALID_MOOD_RESULT'

    response = client.put('/api/quiz-results', params={'id': result['id']}, json={'moodResult': 'Balanced'})
    assert response.json()['moodResult'] == 'Balanced'

    response = client.delete('/api/quiz-results', params={'id': result['id']})
    assert response.json()['deletedRecord']['id'] == result['id']
