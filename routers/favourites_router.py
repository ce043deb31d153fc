# -*- coding: utf-8 -*-
"""
즐겨찾기(Favourite) 관련 API 라우터

이 파일은 즐겨찾기 기능과 관련된 API 엔드포인트를 정의합니다.
- GET /: 내 즐겨찾기 목록 조회
- POST /create: 새 즐겨찾기 추가
- PATCH /update/{favourite_id}: 특정 즐겨찾기 수정
- DELETE /delete/{favourite_id}: 특정 즐겨찾기 삭제

이 라우터의 모든 엔드포인트는 사용자 인증(X-User-Token, X-User-Email 헤더)을 필요로 합니다.
인증에 실패하면 인증 실패 경로로 리다이렉트됩니다.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List

# --- 프로젝트 내부 모듈 Import ---
import crud
import schemas
import core.auth as auth
from database import get_db, User

# "/api/v1/favourites" 경로에 대한 API 작업을 그룹화하는 APIRouter 객체를 생성합니다.
router = APIRouter()


@router.get(
    "/",
    response_model=List[schemas.FavouriteResponse],
    summary="내 즐겨찾기 목록 조회 (인증 필요)"
)
def read_favourites(
    db: Session = Depends(get_db),
    current_user: User = Depends(auth.get_current_active_user)
):
    """
    현재 로그인된 사용자의 모든 즐겨찾기 목록을 id 순서로 반환합니다.

    - **인증**: `X-User-Token`, `X-User-Email` 헤더가 필요합니다.
    - **응답**: `{id, user_id, product_id}` 의 리스트.
    """
    return crud.get_favourites_by_user(db, current_user=current_user)


@router.post(
    "/create",
    response_model=schemas.FavouriteResponse,
    status_code=status.HTTP_201_CREATED,
    summary="새 즐겨찾기 추가 (인증 필요)"
)
def create_favourite(
    payload: schemas.FavouriteRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(auth.get_current_active_user)
):
    """
    현재 로그인된 사용자의 새 즐겨찾기를 추가합니다.

    - **요청**: `{"favourite": {"user_id": ..., "product_id": ...}}`
    - **에러**:
        - `user_id`가 본인이 아니면 **401 Unauthorized**.
        - 값이 비었거나 존재하지 않는 사용자/상품이면 **422 Unprocessable Entity**.
    """
    return crud.create_favourite(db=db, params=payload.favourite, current_user=current_user)


@router.patch(
    "/update/{favourite_id}",
    response_model=schemas.FavouriteResponse,
    summary="즐겨찾기 수정 (인증 필요)"
)
def update_favourite(
    favourite_id: int,
    payload: schemas.FavouriteRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(auth.get_current_active_user)
):
    """
    ID에 해당하는 즐겨찾기의 `user_id`, `product_id`를 변경합니다.
    본인의 즐겨찾기만 수정할 수 있습니다.

    - **에러**: 없으면 404, 본인 것이 아니면 401, 값이 올바르지 않으면 422.
    """
    return crud.update_favourite(
        db=db, favourite_id=favourite_id, params=payload.favourite, current_user=current_user
    )


@router.delete(
    "/delete/{favourite_id}",
    response_model=schemas.FavouriteResponse,
    summary="즐겨찾기 삭제 (인증 필요)"
)
def delete_favourite(
    favourite_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(auth.get_current_active_user)
):
    """
    ID에 해당하는 즐겨찾기를 삭제합니다.
    다른 사용자의 즐겨찾기는 존재하지 않는 것과 같이 취급합니다.

    - **응답**: 삭제된 즐겨찾기 정보.
    - **에러**: 즐겨찾기가 없거나, 본인의 것이 아닐 경우 404 (Not Found) 에러를 반환합니다.
    """
    db_favourite = crud.delete_favourite(db=db, favourite_id=favourite_id, current_user=current_user)
    if db_favourite is None:
        raise HTTPException(status_code=404, detail="해당 ID의 즐겨찾기를 찾을 수 없거나 삭제 권한이 없습니다.")

    return db_favourite
