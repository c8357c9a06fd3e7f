from sqlalchemy import Column, Integer, Date, DateTime, ForeignKey, func
from wellness.models.model_base import Base


class UserStreak(Base):
    __tablename__ = "user_streaks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    current_streak = Column(Integer, default=0, nullable=False)
    longest_streak = Column(Integer, default=0, nullable=False)
    last_activity_date = Column(Date)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now(), nullable=False)
