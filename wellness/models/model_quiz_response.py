from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, func
from wellness.models.model_base import Base


class QuizResponse(Base):
    __tablename__ = "quiz_responses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    question_id = Column(String(100), nullable=False)
    answer_index = Column(Integer, nullable=False)
    category = Column(String(100), nullable=False)
    created_at = Column(DateTime, default=func.now(), nullable=False)
