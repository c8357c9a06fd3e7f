from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, func
from wellness.models.model_base import Base


class UserMetric(Base):
    __tablename__ = "user_metrics"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    metric_type = Column(String(20), nullable=False)
    value = Column(String(255), nullable=False)
    date = Column(String(20), nullable=False)
    created_at = Column(DateTime, default=func.now(), nullable=False)
