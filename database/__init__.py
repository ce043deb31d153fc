# base.py에서 DB 연결/세션 관련 핵심 구성요소를 가져옵니다.
from .base import Base, engine, get_db, SessionLocal, id_in_range

# models.py에서 모든 테이블 모델을 가져옵니다.
from .models import (
    User,
    ProductType,
    Product,
    Favourite,
)
