from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
import crud
import schemas
from core import auth
from database import get_db, User

router = APIRouter()

@router.post("/signup", response_model=schemas.UserWithToken, status_code=status.HTTP_201_CREATED, summary="회원가입")
def create_new_user(user: schemas.UserCreate, db: Session = Depends(get_db)):
    db_user = crud.get_user_by_email(db, email=user.email)
    if db_user:
        raise HTTPException(status_code=400, detail="이미 등록된 이메일입니다.")
    return crud.create_user(db=db, user=user)

@router.post("/sign_in", response_model=schemas.Token, summary="로그인 및 인증 토큰 확인")
def sign_in(credentials: schemas.SignIn, db: Session = Depends(get_db)):
    user = auth.authenticate_user(db, credentials.email, credentials.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="이메일 또는 비밀번호가 올바르지 않습니다.",
        )
    return {"email": user.email, "authentication_token": user.authentication_token}

@router.get("/me", response_model=schemas.User, summary="내 정보 확인 (인증 필요)")
def read_users_me(current_user: User = Depends(auth.get_current_active_user)):
    return current_user

@router.delete("/me", status_code=status.HTTP_204_NO_CONTENT, summary="회원 탈퇴 (인증 필요)")
def delete_users_me(
    db: Session = Depends(get_db),
    current_user: User = Depends(auth.get_current_active_user)
):
    # 사용자의 즐겨찾기도 함께 삭제됩니다.
    crud.delete_user(db, current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
