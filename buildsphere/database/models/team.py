from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from ..database import Base

class Team(Base):
    """
    프로젝트 현장에 투입되는 작업 팀을 나타냅니다.
    하나의 팀은 정확히 하나의 프로젝트에 소속됩니다.
    """
    __tablename__ = "teams"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text)

    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)
    project = relationship("Project", back_populates="teams")
