import logging
from typing import Any, Dict

from fastapi import Depends
from sqlalchemy import func

from wellness.db.base import atomic
from wellness.helpers.exception_handler import CustomException
from wellness.helpers.scoring import score_categories
from wellness.models.model_quiz_response import QuizResponse
from wellness.models.model_quiz_result import QuizResult
from wellness.repository.repo_quiz import QuizResponseRepository, QuizResultRepository
from wellness.repository.repo_user import UserRepository
from wellness.schemas.sche_quiz import QuizSubmitRequest, QuizResponseItem, QuizResultResponse
from wellness.services.srv_base import CrudService

logger = logging.getLogger(__name__)


class QuizResponseService(CrudService):
    label = 'Quiz response'
    response_schema = QuizResponseItem

    def __init__(self, repo: QuizResponseRepository = Depends(), user_repo: UserRepository = Depends()):
        self.repo = repo
        self.user_repo = user_repo


class QuizResultService(CrudService):
    label = 'Quiz result'
    response_schema = QuizResultResponse

    def __init__(self, repo: QuizResultRepository = Depends(), user_repo: UserRepository = Depends()):
        self.repo = repo
        self.user_repo = user_repo


class QuizSubmissionService:
    def __init__(
        self,
        response_repo: QuizResponseRepository = Depends(),
        result_repo: QuizResultRepository = Depends(),
        user_repo: UserRepository = Depends()
    ):
        self.response_repo = response_repo
        self.result_repo = result_repo
        self.user_repo = user_repo

    def submit(self, data: QuizSubmitRequest) -> Dict[str, Any]:
        """
        Score a batch of answers and store them with their result.

        Every answer and the result share one timestamp and are committed
        together; a failure on any row leaves nothing behind.
        """
        if not self.user_repo.exists(data.user_id):
            raise CustomException(http_code=404, code='USER_NOT_FOUND', message='User not found')

        score = score_categories(answer.category for answer in data.responses)
        try:
            with atomic(self.result_repo.db):
                # database clock, the same one the created_at column defaults use
                timestamp = self.result_repo.db.query(func.now()).scalar()
                responses = [
                    self.response_repo.create(QuizResponse(
                        user_id=data.user_id,
                        question_id=answer.question_id,
                        answer_index=answer.answer_index,
                        category=answer.category,
                        created_at=timestamp,
                    ), commit=False)
                    for answer in data.responses
                ]
                result = self.result_repo.create(QuizResult(
                    user_id=data.user_id,
                    balance_score=score.balance_score,
                    mood_result=score.mood_result.value,
                    cognitive_score=score.cognitive_score,
                    physical_score=score.physical_score,
                    digital_score=score.digital_score,
                    created_at=timestamp,
                ), commit=False)
        except CustomException:
            raise
        except Exception as e:
            logger.error(f"Failed to save quiz submission for user {data.user_id}: {e}", exc_info=True)
            raise CustomException(
                http_code=500,
                code='DATABASE_ERROR',
                message=f'Failed to save quiz submission: {e}'
            )

        logger.info(
            f"Quiz scored for user {data.user_id}: balance={score.balance_score} mood={score.mood_result.value}"
        )
        return {'result': result, 'responses': responses}
