# -*- coding: utf-8 -*-
"""
데이터베이스 테이블과 매핑되는 SQLAlchemy 모델(ORM 클래스)을 정의하는 파일
"""
from sqlalchemy import Column, Integer, String, ForeignKey, TIMESTAMP
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from .base import Base  # base.py에서 정의한 Base를 가져옵니다.

# --- 데이터베이스 모델(테이블) 정의 ---
class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), nullable=False)
    email = Column(String(100), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    # X-User-Token 헤더와 비교되는 인증 토큰 (회원가입 시 발급)
    authentication_token = Column(String(64), unique=True, index=True, nullable=False)
    created_at = Column(TIMESTAMP, server_default=func.now())
    # 사용자가 삭제되면 즐겨찾기도 함께 삭제됩니다.
    favourites = relationship("Favourite", back_populates="owner", cascade="all, delete-orphan")

class ProductType(Base):
    __tablename__ = "product_types"
    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False)
    products = relationship("Product", back_populates="type")

class Product(Base):
    __tablename__ = "products"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    type_id = Column(Integer, ForeignKey("product_types.id"), nullable=True)
    type = relationship("ProductType", back_populates="products")
    favourites = relationship("Favourite", back_populates="product")

class Favourite(Base):
    __tablename__ = "favourites"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    product_id = Column(Integer, ForeignKey("products.id"), index=True, nullable=False)
    created_at = Column(TIMESTAMP, server_default=func.now())
    owner = relationship("User", back_populates="favourites")
    product = relationship("Product", back_populates="favourites")
