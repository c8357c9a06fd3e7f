from fastapi import APIRouter

from wellness.api import (
    api_healthcheck, api_user, api_quiz, api_quiz_response, api_quiz_result, api_wellness_goal,
    api_wellness_plan, api_user_metric, api_badge, api_user_streak, api_daily_task, api_family_member,
    api_family, api_community, api_community_post, api_post_like, api_post_comment, api_user_settings,
    api_chatbot
)

router = APIRouter()

router.include_router(api_healthcheck.router, tags=["health-check"], prefix="/healthcheck")
router.include_router(api_user.router, tags=["user"], prefix="/users")
router.include_router(api_quiz.router, tags=["quiz"], prefix="/quiz")
router.include_router(api_quiz_response.router, tags=["quiz"], prefix="/quiz-responses")
router.include_router(api_quiz_result.router, tags=["quiz"], prefix="/quiz-results")
router.include_router(api_wellness_goal.router, tags=["wellness"], prefix="/wellness-goals")
router.include_router(api_wellness_plan.router, tags=["wellness"], prefix="/wellness-plans")
router.include_router(api_user_metric.router, tags=["dashboard"], prefix="/user-metrics")
router.include_router(api_badge.router, tags=["dashboard"], prefix="/badges")
router.include_router(api_user_streak.router, tags=["dashboard"], prefix="/user-streaks")
router.include_router(api_daily_task.router, tags=["dashboard"], prefix="/daily-tasks")
router.include_router(api_family_member.router, tags=["family"], prefix="/family-members")
router.include_router(api_family.router, tags=["family"], prefix="/family")
router.include_router(api_community.router, tags=["community"], prefix="/community")
router.include_router(api_community_post.router, tags=["community"], prefix="/community-posts")
router.include_router(api_post_like.router, tags=["community"], prefix="/post-likes")
router.include_router(api_post_comment.router, tags=["community"], prefix="/post-comments")
router.include_router(api_user_settings.router, tags=["settings"], prefix="/user-settings")
router.include_router(api_chatbot.router, tags=["chatbot"], prefix="/chatbot")
