from typing import Any

from fastapi import APIRouter, Depends

from wellness.schemas.sche_chatbot import ChatMessageRequest, ChatReplyResponse
from wellness.services.srv_chatbot import ChatbotService

router = APIRouter()


@router.post('/messages', response_model=ChatReplyResponse)
def send_message(data: ChatMessageRequest, chatbot_service: ChatbotService = Depends()) -> Any:
    return chatbot_service.reply(data.message)
