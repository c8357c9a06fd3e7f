from wellness.schemas.sche_base import CamelModel, RequiredText


class ChatMessageRequest(CamelModel):
    message: RequiredText


class ChatReplyResponse(CamelModel):
    topic: str
    reply: str
