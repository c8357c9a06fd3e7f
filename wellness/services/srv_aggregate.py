"""
Aggregate Service - read-only composite views.

Each view fans out over independent single-table reads and merges them into
one payload. None of the reads depends on another's result.
"""
import logging

from fastapi import Depends

from wellness.helpers.exception_handler import CustomException, NotFoundException
from wellness.repository.repo_badge import BadgeRepository
from wellness.repository.repo_family import FamilyMemberRepository
from wellness.repository.repo_metric import UserMetricRepository
from wellness.repository.repo_quiz import QuizResultRepository
from wellness.repository.repo_streak import UserStreakRepository
from wellness.repository.repo_task import DailyTaskRepository
from wellness.repository.repo_user import UserRepository
from wellness.repository.repo_wellness import WellnessGoalRepository, WellnessPlanRepository
from wellness.schemas.sche_dashboard import DashboardResponse
from wellness.schemas.sche_family import (
    FamilyGroupView, FamilyMemberProgress, MemberProfile, MemberProgress, LastQuizResult
)
from wellness.schemas.sche_wellness import WellnessPlanView

logger = logging.getLogger(__name__)

UNKNOWN_USER_NAME = 'Unknown User'


class AggregateService:
    def __init__(
        self,
        user_repo: UserRepository = Depends(),
        metric_repo: UserMetricRepository = Depends(),
        streak_repo: UserStreakRepository = Depends(),
        badge_repo: BadgeRepository = Depends(),
        task_repo: DailyTaskRepository = Depends(),
        plan_repo: WellnessPlanRepository = Depends(),
        goal_repo: WellnessGoalRepository = Depends(),
        family_repo: FamilyMemberRepository = Depends(),
        quiz_result_repo: QuizResultRepository = Depends()
    ):
        self.user_repo = user_repo
        self.metric_repo = metric_repo
        self.streak_repo = streak_repo
        self.badge_repo = badge_repo
        self.task_repo = task_repo
        self.plan_repo = plan_repo
        self.goal_repo = goal_repo
        self.family_repo = family_repo
        self.quiz_result_repo = quiz_result_repo

    def get_user_dashboard(self, user_id: int) -> DashboardResponse:
        metrics = self.metric_repo.list_by_user(user_id)
        streak = self.streak_repo.get_by_user_id(user_id)
        badges = self.badge_repo.list_by_user(user_id)
        tasks = self.task_repo.list_by_user(user_id)

        if not (metrics or streak or badges or tasks):
            raise NotFoundException('No dashboard data found for this user', 'USER_DATA_NOT_FOUND')

        return DashboardResponse(
            user_id=user_id,
            metrics=metrics,
            streaks=streak,
            badges=badges,
            tasks=tasks,
        )

    def get_user_wellness_plan(self, user_id: int) -> WellnessPlanView:
        plan = self.plan_repo.get_latest_by_user(user_id)
        goals = self.goal_repo.list_by_user(user_id)

        if plan is None:
            raise NotFoundException('Wellness plan not found for this user', 'PLAN_NOT_FOUND')

        return WellnessPlanView(user_id=user_id, plan=plan, goals=goals)

    def get_family_group(self, family_group_id: str) -> FamilyGroupView:
        """
        Progress summary for every member of a family group.

        Per-member lookups are batched by user id, so the view costs a fixed
        number of queries regardless of group size. Members whose user row is
        gone still appear with a placeholder profile.
        """
        group_id = family_group_id.strip()
        if not group_id:
            raise CustomException(http_code=400, code='MISSING_GROUP_ID', message='Family group ID is required')

        members = self.family_repo.get_by_group(group_id)
        if not members:
            return FamilyGroupView(family_group_id=group_id, members=[])

        user_ids = list({member.user_id for member in members})
        users = {user.id: user for user in self.user_repo.get_by_ids(user_ids)}
        streaks = self.streak_repo.get_by_users(user_ids)
        badge_counts = self.badge_repo.count_by_users(user_ids)
        latest_results = self.quiz_result_repo.get_latest_by_users(user_ids)

        progress = []
        for member in members:
            user = users.get(member.user_id)
            streak = streaks.get(member.user_id)
            result = latest_results.get(member.user_id)
            progress.append(FamilyMemberProgress(
                id=member.id,
                user_id=member.user_id,
                joined_at=member.joined_at,
                user=MemberProfile.model_validate(user) if user
                else MemberProfile(id=member.user_id, name=UNKNOWN_USER_NAME),
                progress=MemberProgress(
                    current_streak=streak.current_streak if streak else 0,
                    longest_streak=streak.longest_streak if streak else 0,
                    badge_count=badge_counts.get(member.user_id, 0),
                    last_quiz_result=LastQuizResult.model_validate(result) if result else None,
                ),
            ))

        logger.info(f"Assembled family group {group_id} with {len(progress)} members")
        return FamilyGroupView(family_group_id=group_id, members=progress)
