# -*- coding: utf-8 -*-
"""
상품(Product) 조회 API 라우터

즐겨찾기가 가리키는 상품 정보를 조회하기 위한 엔드포인트를 정의합니다.
- GET /: 상품 목록 조회
- GET /{product_id}: 특정 상품 조회
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List

import crud
import schemas
from database import get_db

router = APIRouter()


@router.get("/", response_model=List[schemas.Product], summary="상품 목록 조회")
def read_products(skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    return crud.get_products(db, skip=skip, limit=limit)


@router.get("/{product_id}", response_model=schemas.Product, summary="특정 상품 조회")
def read_product(product_id: int, db: Session = Depends(get_db)):
    db_product = crud.get_product(db, product_id=product_id)
    if db_product is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"ID {product_id}에 해당하는 상품을 찾을 수 없습니다."
        )
    return db_product
