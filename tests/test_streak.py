from datetime import date, timedelta

from wellness.services.srv_streak import advance_streak

TODAY = date(2026, 3, 10)


def test_first_activity_starts_streak():
    assert advance_streak(0, 0, None, TODAY) == (1, 1, TODAY)


def test_next_day_extends_streak():
    assert advance_streak(4, 6, TODAY - timedelta(days=1), TODAY) == (5, 6, TODAY)


def test_gap_resets_streak_but_keeps_longest():
    assert advance_streak(4, 6, TODAY - timedelta(days=3), TODAY) == (1, 6, TODAY)


def test_same_day_is_ignored():
    assert advance_streak(2, 2, TODAY, TODAY) == (2, 2, TODAY)


def test_longest_follows_current():
    assert advance_streak(6, 6, TODAY - timedelta(days=1), TODAY) == (7, 7, TODAY)


def test_streak_create_and_duplicate(client, user):
    response = client.post('/api/user-streaks', json={'userId': user['id'], 'currentStreak': 3})
    assert response.status_code == 201
    assert response.json()['longestStreak'] == 3

    response = client.post('/api/user-streaks', json={'userId': user['id']})
    assert response.status_code == 409
    assert response.json()['code'] == 'STREAK_EXISTS'


def test_completing_tasks_advances_streak_and_awards_badges(client, user):
    start = date(2026, 3, 1)
    for day in range(3):
        response = client.post('/api/daily-tasks', json={
            'userId': user['id'],
            'taskName': 'Meditate',
            'taskTime': '07:00',
            'completed': True,
            'completionDate': (start + timedelta(days=day)).isoformat(),
        })
        assert response.status_code == 201

    streak = client.get('/api/user-streaks', params={'userId': user['id']}).json()[0]
    assert streak['currentStreak'] == 3
    assert streak['longestStreak'] == 3

    badges = client.get('/api/badges', params={'userId': user['id']}).json()
    assert [badge['badgeId'] for badge in badges] == ['streak-3']


def test_uncompleted_task_does_not_touch_streak(client, user):
    response = client.post('/api/daily-tasks', json={
        'userId': user['id'], 'taskName': 'Walk', 'taskTime': '18:00',
    })
    assert response.status_code == 201
    assert response.json()['completionDate'] is None
    assert client.get('/api/user-streaks', params={'userId': user['id']}).json() == []


def test_completing_task_on_update(client, user):
    task = client.post('/api/daily-tasks', json={
        'userId': user['id'], 'taskName': 'Walk', 'taskTime': '18:00',
    }).json()

    response = client.put('/api/daily-tasks', params={'id': task['id']}, json={'completed': True})
    assert response.status_code == 200
    assert response.json()['completed'] is True
    assert response.json()['completionDate'] is not None

    streak = client.get('/api/user-streaks', params={'userId': user['id']}).json()[0]
    assert streak['currentStreak'] == 1

    response = client.put('/api/daily-tasks', params={'id': task['id']}, json={'completed': False})
    assert response.json()['completionDate'] is None
