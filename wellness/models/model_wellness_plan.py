from sqlalchemy import Column, Integer, DateTime, ForeignKey, JSON, func
from wellness.models.model_base import Base


class WellnessPlan(Base):
    __tablename__ = "wellness_plans"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    plan_data = Column(JSON, nullable=False)
    created_at = Column(DateTime, default=func.now(), nullable=False)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now(), nullable=False)
