from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from ..database import Base

class Machine(Base):
    """
    프로젝트 현장에서 운용되는 건설 장비(예: 굴착기, 크레인)를 나타냅니다.
    """
    __tablename__ = "machines"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text)
    brand = Column(String)
    status = Column(String, nullable=False, default="AVAILABLE")

    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)
    project = relationship("Project", back_populates="machines")
