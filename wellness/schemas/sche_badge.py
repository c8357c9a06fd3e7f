from datetime import datetime
from typing import Optional

from wellness.schemas.sche_base import CamelModel, RequiredText, UpdateText, UpdateRequestBase


class BadgeCreateRequest(CamelModel):
    user_id: int
    badge_id: RequiredText
    badge_name: RequiredText


class BadgeUpdateRequest(UpdateRequestBase):
    badge_id: Optional[UpdateText] = None
    badge_name: Optional[UpdateText] = None


class BadgeResponse(CamelModel):
    id: int
    user_id: int
    badge_id: str
    badge_name: str
    earned_at: datetime
