def test_health(client):
    assert client.get('/health').json()['status'] == 'healthy'
    assert client.get('/api/healthcheck').json() == {'status': 'healthy'}


def test_create_and_fetch_user(client):
    response = client.post('/api/users', json={'email': 'Ana@Example.com', 'name': '  Ana '})
    assert response.status_code == 201
    user = response.json()
    assert user['email'] == 'ana@example.com'
    assert user['name'] == 'Ana'
    assert 'createdAt' in user

    assert client.get('/api/users', params={'id': user['id']}).json() == user


def test_duplicate_email(client, user):
    response = client.post('/api/users', json={'email': user['email'].upper(), 'name': 'Other'})
    assert response.status_code == 409
    assert response.json()['code'] == 'EMAIL_EXISTS'


def test_create_user_validation(client):
    response = client.post('/api/users', json={'name': 'No Email'})
    assert response.status_code == 400
    assert response.json()['code'] == 'MISSING_EMAIL'

    response = client.post('/api/users', json={'email': 'not-an-email', 'name': 'Bad'})
    assert response.status_code == 400
    assert response.json()['code'] == 'INVALID_EMAIL'


def test_unknown_user(client):
    response = client.get('/api/users', params={'id': 999})
    assert response.status_code == 404
    assert response.json() == {'error': 'User not found', 'code': 'USER_NOT_FOUND'}


def test_non_numeric_id(client):
    response = client.get('/api/users', params={'id': 'abc'})
    assert response.status_code == 400
    assert response.json()['code'] == 'INVALID_ID'


def test_update_user(client, user):
    response = client.put('/api/users', params={'id': user['id']}, json={'name': 'Renamed'})
    assert response.status_code == 200
    assert response.json()['name'] == 'Renamed'
    assert response.json()['email'] == user['email']


def test_update_with_no_fields_returns_record(client, user):
    response = client.put('/api/users', params={'id': user['id']}, json={})
    assert response.status_code == 200
    assert response.json()['name'] == user['name']


def test_delete_user_cascades(client, user, create_user, create_post):
    other = create_user()
    post = create_post(other)
    client.post(f"/api/community/posts/{post['id']}/like", json={'userId': user['id']})
    client.post('/api/post-comments', json={'postId': post['id'], 'userId': user['id'], 'commentText': 'Nice'})
    client.post('/api/badges', json={'userId': user['id'], 'badgeId': 'b1', 'badgeName': 'First'})

    response = client.delete('/api/users', params={'id': user['id']})
    assert response.status_code == 200
    assert response.json()['deletedUser']['id'] == user['id']

    assert client.get('/api/badges', params={'userId': user['id']}).json() == []
    post = client.get('/api/community-posts', params={'id': post['id']}).json()
    assert post['likesCount'] == 0
    assert post['commentsCount'] == 0

    assert client.delete('/api/users', params={'id': user['id']}).status_code == 404
