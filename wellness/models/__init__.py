from wellness.models.model_base import Base
from wellness.models.model_user import User
from wellness.models.model_quiz_response import QuizResponse
from wellness.models.model_quiz_result import QuizResult
from wellness.models.model_wellness_goal import WellnessGoal
from wellness.models.model_wellness_plan import WellnessPlan
from wellness.models.model_user_metric import UserMetric
from wellness.models.model_badge import Badge
from wellness.models.model_user_streak import UserStreak
from wellness.models.model_daily_task import DailyTask
from wellness.models.model_family_member import FamilyMember
from wellness.models.model_community_post import CommunityPost
from wellness.models.model_post_like import PostLike
from wellness.models.model_post_comment import PostComment
from wellness.models.model_user_settings import UserSettings
