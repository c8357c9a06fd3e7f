def test_create_post_defaults(client, user, create_post):
    post = create_post(user, category='fitness')
    assert post['likesCount'] == 0
    assert post['commentsCount'] == 0
    assert post['isAnonymous'] is False

    response = client.post('/api/community-posts', json={'authorName': 'Anon', 'category': 'general'})
    assert response.status_code == 400
    assert response.json()['code'] == 'MISSING_CONTENT'


def test_counters_are_not_client_writable(client, user, create_post):
    post = create_post(user)
    response = client.put('/api/community-posts', params={'id': post['id']},
                          json={'likesCount': 50, 'content': 'Edited'})
    assert response.status_code == 200
    assert response.json()['likesCount'] == 0
    assert response.json()['content'] == 'Edited'


def test_like_toggle(client, user, create_post):
    post = create_post(user)
    url = f"/api/community/posts/{post['id']}/like"

    response = client.post(url, json={'userId': user['id']})
    assert response.status_code == 200
    assert response.json() == {'action': 'liked', 'postId': post['id'], 'userId': user['id'], 'likesCount': 1}

    response = client.post(url, json={'userId': user['id']})
    assert response.json()['action'] == 'unliked'
    assert response.json()['likesCount'] == 0


def test_like_toggle_from_two_users(client, user, create_user, create_post):
    other = create_user()
    post = create_post(user)
    url = f"/api/community/posts/{post['id']}/like"

    assert client.post(url, json={'userId': user['id']}).json()['likesCount'] == 1
    assert client.post(url, json={'userId': other['id']}).json()['likesCount'] == 2

    response = client.post(url, json={'userId': user['id']})
    assert response.json()['action'] == 'unliked'
    assert response.json()['likesCount'] == 1
    assert client.get('/api/community-posts', params={'id': post['id']}).json()['likesCount'] == 1

def test_like_unknown_post_or_user(client, user, create_post):
    response = client.post('/api/community/posts/999/like', json={'userId': user['id']})
    assert response.status_code == 404
    assert response.json()['code'] == 'POST_NOT_FOUND'

    post = create_post(user)
    response = client.post(f"/api/community/posts/{post['id']}/like", json={'userId': 999})
    assert response.status_code == 404
    assert response.json()['code'] == 'USER_NOT_FOUND'


def test_post_like_resource(client, user, create_user, create_post):
    post = create_post(user)
    response = client.post('/api/post-likes', json={'postId': post['id'], 'userId': user['id']})
    assert response.status_code == 201
    like = response.json()

    response = client.post('/api/post-likes', json={'postId': post['id'], 'userId': user['id']})
    assert response.status_code == 409
    assert response.json()['code'] == 'ALREADY_LIKED'

    client.post('/api/post-likes', json={'postId': post['id'], 'userId': create_user()['id']})
    assert client.get('/api/community-posts', params={'id': post['id']}).json()['likesCount'] == 2

    response = client.delete('/api/post-likes', params={'id': like['id']})
    assert response.json()['deletedPostLike']['id'] == like['id']
    assert client.get('/api/community-posts', params={'id': post['id']}).json()['likesCount'] == 1


def test_comment_count_follows_comments(client, user, create_post):
    post = create_post(user)
    comment_ids = []
    for text in ('first', 'second', 'third'):
        response = client.post('/api/post-comments', json={
            'postId': post['id'], 'userId': user['id'], 'commentText': text,
        })
        assert response.status_code == 201
        comment_ids.append(response.json()['id'])

    assert client.get('/api/community-posts', params={'id': post['id']}).json()['commentsCount'] == 3

    client.delete('/api/post-comments', params={'id': comment_ids[0]})
    response = client.delete('/api/post-comments', params={'id': comment_ids[0]})
    assert response.status_code == 404
    assert response.json()['code'] == 'COMMENT_NOT_FOUND'

    assert client.get('/api/community-posts', params={'id': post['id']}).json()['commentsCount'] == 2
    listed = client.get('/api/post-comments', params={'postId': post['id']}).json()
    assert len(listed) == 2


def test_comment_on_missing_post(client, user):
    response = client.post('/api/post-comments', json={'postId': 42, 'userId': user['id'], 'commentText': 'hi'})
    assert response.status_code == 404
    assert response.json()['code'] == 'POST_NOT_FOUND'


def test_delete_post_removes_children(client, user, create_post):
    post = create_post(user)
    client.post(f"/api/community/posts/{post['id']}/like", json={'userId': user['id']})
    client.post('/api/post-comments', json={'postId': post['id'], 'userId': user['id'], 'commentText': 'x'})

    response = client.delete('/api/community-posts', params={'id': post['id']})
    assert response.status_code == 200
    assert response.json()['deletedPost']['id'] == post['id']
    assert client.get('/api/post-likes', params={'postId': post['id']}).json() == []
    assert client.get('/api/post-comments', params={'postId': post['id']}).json() == []


def test_feed_pages_newest_first(client, user, create_user, create_post):
    other = create_user()
    posts = [create_post(user if index % 2 else other, content=f'post {index}', category='sleep')
             for index in range(5)]
    create_post(user, category='food')

    response = client.get('/api/community/feed', params={'category': 'sleep', 'limit': 2})
    assert response.status_code == 200
    body = response.json()
    assert body['pagination'] == {'limit': 2, 'offset': 0, 'total': 5}
    assert [post['id'] for post in body['posts']] == [posts[4]['id'], posts[3]['id']]

    second = client.get('/api/community/feed', params={'category': 'sleep', 'limit': 2, 'offset': 2}).json()
    assert not {p['id'] for p in body['posts']} & {p['id'] for p in second['posts']}

    mine = client.get('/api/community/feed', params={'userId': user['id']}).json()
    assert mine['pagination']['total'] == 3


def test_feed_rejects_bad_paging(client):
    response = client.get('/api/community/feed', params={'limit': 51})
    assert response.status_code == 400
    assert response.json()['code'] == 'LIMIT_EXCEEDED'

    assert client.get('/api/community/feed', params={'limit': 0}).json()['code'] == 'INVALID_LIMIT'
    assert client.get('/api/community/feed', params={'offset': -1}).json()['code'] == 'INVALID_OFFSET'
    assert client.get('/api/community/feed', params={'limit': 'ten'}).json()['code'] == 'INVALID_LIMIT'


def test_search_posts(client, user, create_post):
    create_post(user, content='Morning yoga routine')
    create_post(user, content='Evening run')
    found = client.get('/api/community-posts', params={'search': 'yoga'}).json()
    assert [post['content'] for post in found] == ['Morning yoga routine']
