from sqlalchemy import Column, Integer, String, Text, Float, ForeignKey
from sqlalchemy.orm import relationship
from ..database import Base

class Material(Base):
    """
    프로젝트에 배정된 자재(예: 시멘트, 철근)와 그 수량을 나타냅니다.
    """
    __tablename__ = "materials"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text)
    quantity = Column(Float, nullable=False, default=0)
    unit = Column(String)

    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)
    project = relationship("Project", back_populates="materials")
