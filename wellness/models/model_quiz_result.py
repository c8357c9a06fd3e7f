from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, func
from wellness.models.model_base import Base


class QuizResult(Base):
    __tablename__ = "quiz_results"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    balance_score = Column(Integer, nullable=False)
    mood_result = Column(String(20), nullable=False)
    cognitive_score = Column(Integer, nullable=False)
    physical_score = Column(Integer, nullable=False)
    digital_score = Column(Integer, nullable=False)
    created_at = Column(DateTime, default=func.now(), nullable=False)
