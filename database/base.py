# -*- coding: utf-8 -*-
"""
데이터베이스 연결 및 세션 관리를 위한 핵심 설정 파일
- SQLAlchemy 엔진, 세션, Base 모델을 정의합니다.
- .env 파일에서 데이터베이스 접속 정보를 로드합니다.
.env 파일은 깃허브에 올리지 않기
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
import os
from dotenv import load_dotenv

# .env 파일로부터 환경 변수를 로드합니다.
load_dotenv()

# --- 데이터베이스 연결 정보 (환경 변수 사용) ---
DB_HOST = os.getenv("DB_HOST", "localhost")
DB_USER = os.getenv("DB_USER", "default_user")
DB_PASS = os.getenv("DB_PASS", "default_password")
DB_NAME = os.getenv("DB_NAME", "default_db")

# DATABASE_URL이 있으면 DB_* 값보다 우선합니다. (테스트에서는 sqlite:// 사용)
SQLALCHEMY_DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"mysql+mysqlconnector://{DB_USER}:{DB_PASS}@{DB_HOST}/{DB_NAME}",
)


def _engine_options(url: str) -> dict:
    """sqlite는 스레드 검사를 끄고, 메모리 DB라면 연결 하나를 계속 공유합니다."""
    if not url.startswith("sqlite"):
        return {}
    options = {"connect_args": {"check_same_thread": False}}
    if url in ("sqlite://", "sqlite:///:memory:"):
        options["poolclass"] = StaticPool
    return options


engine = create_engine(SQLALCHEMY_DATABASE_URL, **_engine_options(SQLALCHEMY_DATABASE_URL))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

def get_db():
    """FastAPI 의존성 주입을 위한 DB 세션 생성 함수"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

# 정수 기본 키(BIGINT)가 담을 수 있는 최댓값. 범위를 벗어난 ID는 어떤 행과도 일치하지 않습니다.
MAX_ID = 2**63 - 1

def id_in_range(value: int) -> bool:
    """sqlite 드라이버는 범위 밖 정수를 OverflowError로 거부하므로 조회 전에 걸러냅니다."""
    return -MAX_ID - 1 <= value <= MAX_ID
