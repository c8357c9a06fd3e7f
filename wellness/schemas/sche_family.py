from datetime import datetime
from typing import List, Optional

from wellness.schemas.sche_base import CamelModel, RequiredText, UpdateText, UpdateRequestBase


class FamilyMemberCreateRequest(CamelModel):
    family_group_id: RequiredText
    user_id: int


class FamilyMemberUpdateRequest(UpdateRequestBase):
    family_group_id: Optional[UpdateText] = None


class FamilyMemberResponse(CamelModel):
    id: int
    family_group_id: str
    user_id: int
    joined_at: datetime


class MemberProfile(CamelModel):
    id: int
    name: str
    email: str = ''
    avatar_url: Optional[str] = None


class LastQuizResult(CamelModel):
    balance_score: int
    mood_result: str
    cognitive_score: int
    physical_score: int
    digital_score: int
    created_at: datetime


class MemberProgress(CamelModel):
    current_streak: int = 0
    longest_streak: int = 0
    badge_count: int = 0
    last_quiz_result: Optional[LastQuizResult] = None


class FamilyMemberProgress(CamelModel):
    id: int
    user_id: int
    joined_at: datetime
    user: MemberProfile
    progress: MemberProgress


class FamilyGroupView(CamelModel):
    family_group_id: str
    members: List[FamilyMemberProgress]
