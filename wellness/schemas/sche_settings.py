from datetime import datetime
from typing import Optional

from wellness.helpers.enums import Theme
from wellness.schemas.sche_base import CamelModel, UpdateRequestBase


class UserSettingsCreateRequest(CamelModel):
    user_id: int
    theme: Theme = Theme.LIGHT
    notifications_enabled: bool = True
    sms_enabled: bool = False
    email_enabled: bool = True


class UserSettingsUpdateRequest(UpdateRequestBase):
    theme: Optional[Theme] = None
    notifications_enabled: Optional[bool] = None
    sms_enabled: Optional[bool] = None
    email_enabled: Optional[bool] = None


class UserSettingsResponse(CamelModel):
    id: int
    user_id: int
    theme: str
    notifications_enabled: bool
    sms_enabled: bool
    email_enabled: bool
    updated_at: datetime
