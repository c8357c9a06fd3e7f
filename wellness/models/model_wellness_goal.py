from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, func
from wellness.models.model_base import Base


class WellnessGoal(Base):
    __tablename__ = "wellness_goals"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    goal_id = Column(String(100), nullable=False)
    goal_title = Column(String(255), nullable=False)
    selected_at = Column(DateTime, default=func.now(), nullable=False)
