import logging
from datetime import date, timedelta
from typing import List, Optional, Tuple

from fastapi import Depends

from wellness.helpers.exception_handler import CustomException
from wellness.models.model_badge import Badge
from wellness.models.model_user_streak import UserStreak
from wellness.repository.repo_badge import BadgeRepository
from wellness.repository.repo_streak import UserStreakRepository
from wellness.repository.repo_user import UserRepository
from wellness.schemas.sche_streak import UserStreakCreateRequest, UserStreakResponse
from wellness.schemas.sche_base import UpdateRequestBase
from wellness.services.srv_base import CrudService

logger = logging.getLogger(__name__)

# current streak length -> (badge id, badge name)
STREAK_BADGES = {
    3: ('streak-3', '3-Day Streak'),
    7: ('streak-7', '7-Day Streak'),
    30: ('streak-30', '30-Day Streak'),
}


def advance_streak(current: int, longest: int, last_activity: Optional[date],
                   activity_date: date) -> Tuple[int, int, date]:
    """
    Return ``(current, longest, last_activity)`` after activity on ``activity_date``.

    Activity on the following day extends the streak and a longer gap starts
    over at 1. Activity on or before the last recorded day changes nothing.
    """
    if last_activity is not None and activity_date <= last_activity:
        # same-day or backfilled activity never moves the streak
        return current, longest, last_activity
    if last_activity is not None and activity_date - last_activity == timedelta(days=1):
        current += 1
    else:
        current = 1
    return current, max(longest, current), activity_date


class UserStreakService(CrudService):
    label = 'User streak'
    response_schema = UserStreakResponse

    def __init__(
        self,
        repo: UserStreakRepository = Depends(),
        badge_repo: BadgeRepository = Depends(),
        user_repo: UserRepository = Depends()
    ):
        self.repo = repo
        self.badge_repo = badge_repo
        self.user_repo = user_repo

    def create(self, data: UserStreakCreateRequest) -> UserStreak:
        self.ensure_user_exists(data.user_id)
        if self.repo.get_by_user_id(data.user_id):
            raise CustomException(http_code=409, code='STREAK_EXISTS', message='User already has a streak record')
        values = data.model_dump()
        values['longest_streak'] = max(values['longest_streak'], values['current_streak'])
        return self.repo.create(UserStreak(**values))

    def update(self, record_id: int, data: UpdateRequestBase) -> UserStreak:
        record = self.get(record_id)
        changes = data.changes()
        if not changes:
            return record
        current = changes.get('current_streak', record.current_streak)
        changes['longest_streak'] = max(changes.get('longest_streak', record.longest_streak), current)
        return self.repo.update(record, changes)

    def record_activity(self, user_id: int, activity_date: date) -> Tuple[UserStreak, List[Badge]]:
        """
        Advance the user's streak for ``activity_date`` and award milestone badges.

        Only flushes; the caller owns the transaction.
        """
        streak = self.repo.get_by_user_id(user_id)
        if streak is None:
            streak = self.repo.create(
                UserStreak(user_id=user_id, current_streak=0, longest_streak=0), commit=False
            )

        current, longest, last_activity = advance_streak(
            streak.current_streak, streak.longest_streak, streak.last_activity_date, activity_date
        )
        if current != streak.current_streak or last_activity != streak.last_activity_date:
            self.repo.update(streak, {
                'current_streak': current,
                'longest_streak': longest,
                'last_activity_date': last_activity,
            }, commit=False)
            logger.info(f"Streak for user {user_id} is now {current} (longest {longest})")

        return streak, self._award_badges(user_id, current)

    def _award_badges(self, user_id: int, current_streak: int) -> List[Badge]:
        awarded = []
        for threshold, (badge_id, badge_name) in sorted(STREAK_BADGES.items()):
            if current_streak < threshold or self.badge_repo.get_by_user_and_badge(user_id, badge_id):
                continue
            awarded.append(self.badge_repo.create(
                Badge(user_id=user_id, badge_id=badge_id, badge_name=badge_name), commit=False
            ))
            logger.info(f"Awarded badge {badge_id} to user {user_id}")
        return awarded
