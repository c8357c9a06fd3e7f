def test_dashboard_without_data(client, user):
    response = client.get(f"/api/users/{user['id']}/dashboard")
    assert response.status_code == 404
    assert response.json()['code'] == 'USER_DATA_NOT_FOUND'


def test_dashboard_collects_user_rows(client, user, create_user):
    other = create_user()
    client.post('/api/user-metrics', json={
        'userId': user['id'], 'metricType': 'screen_time', 'value': 120, 'date': '2026-03-01',
    })
    client.post('/api/badges', json={'userId': user['id'], 'badgeId': 'welcome', 'badgeName': 'Welcome'})
    client.post('/api/badges', json={'userId': other['id'], 'badgeId': 'welcome', 'badgeName': 'Welcome'})
    client.post('/api/daily-tasks', json={'userId': user['id'], 'taskName': 'Stretch', 'taskTime': '08:00'})

    response = client.get(f"/api/users/{user['id']}/dashboard")
    assert response.status_code == 200
    body = response.json()
    assert body['userId'] == user['id']
    assert len(body['metrics']) == 1
    assert len(body['badges']) == 1
    assert len(body['tasks']) == 1
    assert body['streaks'] is None


def test_wellness_plan_view(client, user):
    response = client.get(f"/api/users/{user['id']}/wellness-plan")
    assert response.status_code == 404
    assert response.json()['code'] == 'PLAN_NOT_FOUND'

    client.post('/api/wellness-plans', json={'userId': user['id'], 'planData': {'week': 1}})
    latest = client.post('/api/wellness-plans', json={'userId': user['id'], 'planData': {'week': 2}}).json()
    client.post('/api/wellness-goals', json={'userId': user['id'], 'goalId': 'move', 'goalTitle': 'Move more'})

    body = client.get(f"/api/users/{user['id']}/wellness-plan").json()
    assert body['plan']['id'] == latest['id']
    assert body['plan']['planData'] == {'week': 2}
    assert [goal['goalId'] for goal in body['goals']] == ['move']


def test_family_group_view(client, create_user):
    ana = create_user(name='Ana')
    ben = create_user(name='Ben')
    for member in (ana, ben):
        client.post('/api/family-members', json={'familyGroupId': 'fam-7', 'userId': member['id']})
    client.post('/api/user-streaks', json={'userId': ana['id'], 'currentStreak': 4, 'longestStreak': 9})
    client.post('/api/badges', json={'userId': ana['id'], 'badgeId': 'b', 'badgeName': 'B'})
    client.post('/api/quiz/submit', json={
        'userId': ben['id'],
        'responses': [{'questionId': 'q1', 'answerIndex': 0, 'category': 'physical'}],
    })

    response = client.get('/api/family/fam-7/members')
    assert response.status_code == 200
    members = {row['user']['name']: row for row in response.json()['members']}
    assert members['Ana']['progress']['currentStreak'] == 4
    assert members['Ana']['progress']['longestStreak'] == 9
    assert members['Ana']['progress']['badgeCount'] == 1
    assert members['Ana']['progress']['lastQuizResult'] is None
    assert members['Ben']['progress']['currentStreak'] == 0
    assert members['Ben']['progress']['lastQuizResult']['physicalScore'] == 1


def test_empty_family_group(client):
    response = client.get('/api/family/nobody/members')
    assert response.status_code == 200
    assert response.json() == {'familyGroupId': 'nobody', 'members': []}


def test_blank_family_group(client):
    response = client.get('/api/family/%20/members')
    assert response.status_code == 400
    assert response.json()['code'] == 'MISSING_GROUP_ID'
