from sqlalchemy.orm import Session
from typing import Optional
from database import User
from schemas import UserCreate
from core import security

def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()

def get_user_by_token(db: Session, token: str) -> Optional[User]:
    return db.query(User).filter(User.authentication_token == token).first()

def create_user(db: Session, user: UserCreate) -> User:
    hashed_password = security.get_password_hash(user.password)
    # 드물지만 토큰이 겹치면 다시 발급합니다.
    token = security.generate_authentication_token()
    while get_user_by_token(db, token) is not None:
        token = security.generate_authentication_token()
    db_user = User(
        **user.model_dump(exclude={"password"}),
        hashed_password=hashed_password,
        authentication_token=token,
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user

def delete_user(db: Session, db_user: User) -> None:
    """
    사용자를 삭제합니다. 사용자의 즐겨찾기는 relationship cascade로 함께 삭제됩니다.
    """
    db.delete(db_user)
    db.commit()
