import pytest

from wellness.services.srv_chatbot import FALLBACK_REPLY, FALLBACK_TOPIC, generate_reply


@pytest.mark.parametrize('message, topic', [
    ("I'm so stressed about work", 'stress'),
    ('I have insomnia', 'sleep'),
    ('What should I eat for dinner?', 'nutrition'),
    ('Give me a WORKOUT plan', 'exercise'),
    ('How much water should I drink?', 'hydration'),
    ('I want to lose some weight', 'weight'),
    ('I feel sad today', 'mood'),
])
def test_keyword_topics(message, topic):
    assert generate_reply(message).topic == topic


def test_first_matching_rule_wins():
    # mentions both stress and sleep; stress comes first in the table
    assert generate_reply('stress keeps me from sleep').topic == 'stress'


def test_fallback_reply():
    reply = generate_reply('hello there')
    assert reply.topic == FALLBACK_TOPIC
    assert reply.reply == FALLBACK_REPLY


def test_chatbot_endpoint(client):
    response = client.post('/api/chatbot/messages', json={'message': 'Tips for better sleep?'})
    assert response.status_code == 200
    assert response.json()['topic'] == 'sleep'


def test_chatbot_rejects_blank_message(client):
    response = client.post('/api/chatbot/messages', json={'message': '   '})
    assert response.status_code == 400
    assert response.json()['code'] == 'MISSING_MESSAGE'
