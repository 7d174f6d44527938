from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from buildsphere.config import database_config

SQLALCHEMY_DATABASE_URL = database_config["DATABASE_URL"]

# check_same_thread는 SQLite에서만 필요합니다.
connect_args = {"check_same_thread": False} if SQLALCHEMY_DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args=connect_args,
    echo=database_config["DATABASE_ECHO"],
)

# autocommit=False, autoflush=False: 리포지토리가 명시적으로 commit을 호출해야 DB에 반영됩니다.
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# 모든 모델 클래스가 상속받을 Base 클래스
Base = declarative_base()
