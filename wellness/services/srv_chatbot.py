"""
Scripted wellness assistant.

Replies come from an ordered keyword rule table: the first rule with a
keyword contained in the lower-cased message wins, otherwise the fallback
reply is used. There is no model behind it and no conversation state.
"""
from dataclasses import dataclass
from typing import Tuple

from wellness.schemas.sche_chatbot import ChatReplyResponse


@dataclass(frozen=True)
class ChatRule:
    topic: str
    keywords: Tuple[str, ...]
    reply: str

    def matches(self, text: str) -> bool:
        return any(keyword in text for keyword in self.keywords)


CHAT_RULES: Tuple[ChatRule, ...] = (
    ChatRule(
        topic='stress',
        keywords=('stress', 'anxious', 'anxiety'),
        reply=(
            "I understand you're feeling stressed. Here are some quick techniques:\n\n"
            "1. Deep breathing: Try the 4-7-8 technique (inhale 4s, hold 7s, exhale 8s)\n"
            "2. Progressive muscle relaxation\n"
            "3. Take a short walk outside\n"
            "4. Listen to calming music\n\n"
            "Would you like me to guide you through a 5-minute meditation?"
        ),
    ),
    ChatRule(
        topic='sleep',
        keywords=('sleep', 'insomnia'),
        reply=(
            "Good sleep is crucial for wellness! Here are my recommendations:\n\n"
            "- Maintain a consistent sleep schedule\n"
            "- Create a relaxing bedtime routine\n"
            "- Limit screen time 1 hour before bed\n"
            "- Keep your bedroom cool (65-68°F)\n"
            "- Try our guided sleep meditation"
        ),
    ),
    ChatRule(
        topic='nutrition',
        keywords=('food', 'meal', 'eat', 'nutrition'),
        reply=(
            "Great question about nutrition! For optimal wellness, focus on:\n\n"
            "- Whole foods and vegetables\n"
            "- Healthy fats (avocado, nuts, olive oil)\n"
            "- Lean proteins (fish, chicken, legumes)\n"
            "- Staying hydrated (8+ glasses of water)"
        ),
    ),
    ChatRule(
        topic='exercise',
        keywords=('exercise', 'workout', 'fitness'),
        reply=(
            "Let's get moving! A balanced week looks like:\n\n"
            "- Cardio: 150 min/week moderate activity\n"
            "- Strength: 2-3 sessions per week\n"
            "- Flexibility: Daily stretching"
        ),
    ),
    ChatRule(
        topic='hydration',
        keywords=('water', 'hydration', 'drink'),
        reply=(
            "Hydration is key!\n\n"
            "Benefits of proper hydration:\n"
            "- Better energy levels\n"
            "- Improved focus\n"
            "- Healthier skin\n"
            "- Better digestion\n\n"
            "I can send you reminders throughout the day. Would you like that?"
        ),
    ),
    ChatRule(
        topic='weight',
        keywords=('weight', 'lose'),
        reply=(
            "Healthy weight management is about sustainable habits, not quick fixes.\n\n"
            "Key principles:\n"
            "- Track your calories mindfully\n"
            "- Practice portion control\n"
            "- Eat regularly (don't skip meals)\n"
            "- Stay active daily\n"
            "- Get adequate sleep"
        ),
    ),
    ChatRule(
        topic='mood',
        keywords=('mood', 'feeling', 'happy', 'sad'),
        reply=(
            "Thank you for sharing how you're feeling. Emotional wellness is just as "
            "important as physical health.\n\n"
            "Activities that boost your mood:\n"
            "- Spend time with loved ones\n"
            "- Exercise releases endorphins\n"
            "- Practice gratitude journaling\n"
            "- Get sunlight exposure\n\n"
            "Would you like to do a mood journaling session now?"
        ),
    ),
)

FALLBACK_TOPIC = 'general'
FALLBACK_REPLY = (
    "I'm here to help with your wellness journey! I can assist with:\n\n"
    "- Nutrition & meal planning\n"
    "- Fitness & exercise guidance\n"
    "- Sleep optimization\n"
    "- Mental health support\n"
    "- Hydration tracking\n"
    "- Progress analysis\n\n"
    "Feel free to ask me anything!"
)


def generate_reply(message: str) -> ChatReplyResponse:
    text = message.lower()
    for rule in CHAT_RULES:
        if rule.matches(text):
            return ChatReplyResponse(topic=rule.topic, reply=rule.reply)
    return ChatReplyResponse(topic=FALLBACK_TOPIC, reply=FALLBACK_REPLY)


class ChatbotService:
    def reply(self, message: str) -> ChatReplyResponse:
        return generate_reply(message)
