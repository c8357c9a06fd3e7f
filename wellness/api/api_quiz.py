from typing import Any

from fastapi import APIRouter, Depends

from wellness.schemas.sche_quiz import QuizSubmitRequest, QuizSubmitResponse
from wellness.services.srv_quiz import QuizSubmissionService

router = APIRouter()


@router.post('/submit', status_code=201, response_model=QuizSubmitResponse)
def submit_quiz(data: QuizSubmitRequest, submission_service: QuizSubmissionService = Depends()) -> Any:
    """
    Score a full quiz submission and store the answers with the result.
    """
    return submission_service.submit(data)
