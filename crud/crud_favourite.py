# -*- coding: utf-8 -*-
"""
즐겨찾기(Favourite) CRUD 모듈

모든 함수는 현재 로그인된 사용자(current_user)를 명시적으로 받습니다.
즐겨찾기의 소유자는 user_id 컬럼으로만 결정되며, 소유자만 수정/삭제할 수 있습니다.
"""

import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from fastapi import HTTPException, status
from typing import List, Optional
from database import Favourite, Product, User, id_in_range
from schemas import FavouriteParams

logger = logging.getLogger(__name__)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)

def _unprocessable(detail: str) -> HTTPException:
    return HTTPException(status_code=422, detail=detail)

def _validate_params(db: Session, params: FavouriteParams) -> None:
    """
    user_id와 product_id가 모두 있고, 실제로 존재하는 사용자/상품을 가리키는지 확인합니다.
    저장소에 쓰기 전에 호출되어야 합니다.
    """
    if not params.is_complete():
        raise _unprocessable("user_id와 product_id는 필수 항목입니다.")
    if not (id_in_range(params.user_id) and id_in_range(params.product_id)):
        raise _unprocessable("user_id 또는 product_id가 허용 범위를 벗어났습니다.")
    if db.query(User.id).filter(User.id == params.user_id).first() is None:
        raise _unprocessable(f"ID {params.user_id}에 해당하는 사용자가 없습니다.")
    if db.query(Product.id).filter(Product.id == params.product_id).first() is None:
        raise _unprocessable(f"ID {params.product_id}에 해당하는 상품이 없습니다.")

def _commit(db: Session, db_favourite: Favourite) -> Favourite:
    # 외래 키 제약 위반 등 저장소 오류는 되돌리고 422로 응답합니다.
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise _unprocessable("즐겨찾기를 저장할 수 없습니다.")
    db.refresh(db_favourite)
    return db_favourite


def get_favourite(db: Session, favourite_id: int) -> Optional[Favourite]:
    if not id_in_range(favourite_id):
        return None
    return db.query(Favourite).filter(Favourite.id == favourite_id).first()

def get_favourites_by_user(db: Session, current_user: User) -> List[Favourite]:
    return (
        db.query(Favourite)
        .filter(Favourite.user_id == current_user.id)
        .order_by(Favourite.id)
        .all()
    )

def create_favourite(db: Session, params: FavouriteParams, current_user: User) -> Favourite:
    """
    현재 사용자의 새 즐겨찾기를 생성합니다.

    Raises:
        HTTPException(401): user_id가 현재 사용자와 다른 경우. 아무것도 저장되지 않습니다.
        HTTPException(422): 필드가 비었거나 존재하지 않는 사용자/상품을 가리키는 경우.
    """
    if params.user_id is not None and params.user_id != current_user.id:
        raise _unauthorized("다른 사용자의 즐겨찾기는 만들 수 없습니다.")
    _validate_params(db, params)

    db_favourite = Favourite(user_id=params.user_id, product_id=params.product_id)
    db.add(db_favourite)
    _commit(db, db_favourite)
    logger.info("즐겨찾기 생성: id=%s user_id=%s product_id=%s",
                db_favourite.id, db_favourite.user_id, db_favourite.product_id)
    return db_favourite

def update_favourite(db: Session, favourite_id: int, params: FavouriteParams, current_user: User) -> Favourite:
    """
    즐겨찾기의 user_id/product_id를 변경합니다.

    Raises:
        HTTPException(404): 해당 ID의 즐겨찾기가 없는 경우.
        HTTPException(401): 즐겨찾기의 소유자가 현재 사용자가 아닌 경우.
        HTTPException(422): 요청 값이 올바르지 않은 경우. 기존 값은 그대로 유지됩니다.
    """
    db_favourite = get_favourite(db, favourite_id)
    if db_favourite is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"ID {favourite_id}에 해당하는 즐겨찾기를 찾을 수 없습니다."
        )
    if db_favourite.user_id != current_user.id:
        raise _unauthorized("본인의 즐겨찾기만 수정할 수 있습니다.")
    _validate_params(db, params)

    db_favourite.user_id = params.user_id
    db_favourite.product_id = params.product_id
    _commit(db, db_favourite)
    logger.info("즐겨찾기 수정: id=%s user_id=%s product_id=%s",
                db_favourite.id, db_favourite.user_id, db_favourite.product_id)
    return db_favourite

def delete_favourite(db: Session, favourite_id: int, current_user: User) -> Optional[Favourite]:
    """
    현재 사용자가 소유한 즐겨찾기를 삭제합니다.
    없거나 다른 사용자의 것이면 None을 반환합니다. (라우터에서 404로 응답)
    """
    if not id_in_range(favourite_id):
        return None
    db_favourite = (
        db.query(Favourite)
        .filter(Favourite.id == favourite_id, Favourite.user_id == current_user.id)
        .first()
    )
    if db_favourite is None:
        return None
    db.delete(db_favourite)
    db.commit()
    logger.info("즐겨찾기 삭제: id=%s user_id=%s", favourite_id, current_user.id)
    return db_favourite
