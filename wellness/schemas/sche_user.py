from datetime import datetime
from typing import Optional

from pydantic import EmailStr

from wellness.schemas.sche_base import CamelModel, RequiredText, UpdateText, UpdateRequestBase


class UserCreateRequest(CamelModel):
    email: EmailStr
    name: RequiredText
    avatar_url: Optional[str] = None


class UserUpdateRequest(UpdateRequestBase):
    email: Optional[EmailStr] = None
    name: Optional[UpdateText] = None
    avatar_url: Optional[str] = None


class UserResponse(CamelModel):
    id: int
    email: str
    name: str
    avatar_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime
