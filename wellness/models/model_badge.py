from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, func
from wellness.models.model_base import Base


class Badge(Base):
    __tablename__ = "badges"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    badge_id = Column(String(100), nullable=False)
    badge_name = Column(String(255), nullable=False)
    earned_at = Column(DateTime, default=func.now(), nullable=False)
