import os
import tempfile

import pytest

_DB_DIR = tempfile.mkdtemp(prefix='wellness-tests-')
os.environ['SQL_DATABASE_URL'] = f"sqlite:///{os.path.join(_DB_DIR, 'test.db')}"

from fastapi.testclient import TestClient  # noqa: E402

from wellness.db.base import engine  # noqa: E402
from wellness.main import app  # noqa: E402
from wellness.models import Base  # noqa: E402


@pytest.fixture(scope='session')
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def clean_tables():
    yield
    with engine.begin() as connection:
        for table in reversed(Base.metadata.sorted_tables):
            connection.execute(table.delete())


@pytest.fixture
def create_user(client):
    counter = {'n': 0}

    def _create(name='Test User', email=None):
        counter['n'] += 1
        payload = {'email': email or f"user{counter['n']}@example.com", 'name': name}
        response = client.post('/api/users', json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def user(create_user):
    return create_user()


@pytest.fixture
def create_post(client):
    def _create(author, content='Hello community', category='general'):
        response = client.post('/api/community-posts', json={
            'authorId': author['id'],
            'authorName': author['name'],
            'content': content,
            'category': category,
        })
        assert response.status_code == 201, response.text
        return response.json()

    return _create
