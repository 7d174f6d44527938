from sqlalchemy import Column, Integer, String, Text, Date, Float
from sqlalchemy.orm import relationship
from ..database import Base

class Project(Base):
    """
    하나의 건설 프로젝트(현장)를 나타냅니다.
    팀(Team), 자재(Material), 장비(Machine)는 모두 이 Project 모델에 종속됩니다.
    """
    __tablename__ = "projects"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False, index=True)
    description = Column(Text)
    location = Column(String)
    start_date = Column(Date)
    expected_end_date = Column(Date)
    budget = Column(Float)
    url_image = Column(String)
    owner_user_id = Column(Integer, nullable=False)

    teams = relationship("Team", back_populates="project", cascade="all, delete-orphan")
    materials = relationship("Material", back_populates="project", cascade="all, delete-orphan")
    machines = relationship("Machine", back_populates="project", cascade="all, delete-orphan")
