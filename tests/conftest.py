# tests/conftest.py
import io
import json
import os
from wsgiref.util import setup_testing_defaults

# 테스트가 실제 DB 파일을 만들지 않도록 보장
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_TO_FILE", "false")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from buildsphere.database.database import Base
from buildsphere.database import models  # noqa: F401  (테이블 메타데이터 등록)


@pytest.fixture
def engine():
    """테스트마다 새로 만드는 인메모리 SQLite 엔진."""
    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def make_environ():
    """WSGI environ을 만드는 헬퍼를 반환합니다. body가 dict/list면 JSON으로 직렬화합니다."""
    def _make(method, path, body=None):
        environ = {}
        setup_testing_defaults(environ)
        if body is None:
            raw = b""
        elif isinstance(body, (bytes, str)):
            raw = body.encode("utf-8") if isinstance(body, str) else body
        else:
            raw = json.dumps(body).encode("utf-8")
        environ.update({
            "REQUEST_METHOD": method,
            "PATH_INFO": path,
            "CONTENT_LENGTH": str(len(raw)),
            "CONTENT_TYPE": "application/json",
            "wsgi.input": io.BytesIO(raw),
        })
        return environ
    return _make
