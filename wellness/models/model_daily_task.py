from sqlalchemy import Column, Integer, String, Boolean, Date, ForeignKey
from wellness.models.model_base import Base


class DailyTask(Base):
    __tablename__ = "daily_tasks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    task_name = Column(String(255), nullable=False)
    task_time = Column(String(50), nullable=False)
    completed = Column(Boolean, default=False, nullable=False)
    completion_date = Column(Date)
