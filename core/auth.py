# -*- coding: utf-8 -*-
"""
사용자 인증(Authentication) 관련 기능을 담당하는 모듈
- 이메일/비밀번호로 사용자 인증 (로그인)
- X-User-Token, X-User-Email 헤더로 현재 사용자 정보를 가져오는 의존성 함수 제공
- 인증 실패 시 인증 실패 경로로 리다이렉트하기 위한 예외 정의
"""

import logging
from typing import Optional
from fastapi import Depends, Security
from fastapi.security import APIKeyHeader
from sqlalchemy.orm import Session

import crud
from database import get_db, User
from . import security # 같은 core 폴더 내의 security 모듈 임포트

logger = logging.getLogger(__name__)

# 인증 실패 시 리다이렉트되는 경로 (app.py에서 이 경로의 엔드포인트를 등록합니다)
AUTHENTICATION_FAILURE_PATH = "/api/v1/authentication_failure"

# 헤더 스키마 정의
# auto_error=False: 헤더가 없을 때 FastAPI가 바로 403을 내지 않고 None을 넘겨주도록 합니다.
token_header = APIKeyHeader(name="X-User-Token", auto_error=False)
email_header = APIKeyHeader(name="X-User-Email", auto_error=False)


class AuthenticationFailed(Exception):
    """자격 증명이 없거나 올바르지 않을 때 발생하는 예외 (app.py에서 리다이렉트로 변환)"""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


# --- 핵심 유틸리티 함수 ---

def authenticate_user(db: Session, email: str, password: str) -> Optional[User]:
    """
    이메일과 비밀번호를 검증하여 사용자를 인증합니다.
    성공 시 사용자 객체를, 실패 시 None을 반환합니다.
    """
    user = crud.get_user_by_email(db, email=email)
    if not user or not security.verify_password(password, user.hashed_password):
        return None
    return user

def resolve_user(db: Session, token: Optional[str], email: Optional[str]) -> User:
    """
    (토큰, 이메일) 쌍을 사용자로 변환합니다.

    Raises:
        AuthenticationFailed: 헤더가 비었거나, 이메일에 해당하는 사용자가 없거나, 토큰이 다른 경우.
    """
    if not token or not email:
        raise AuthenticationFailed("missing credentials")
    user = crud.get_user_by_email(db, email=email)
    if user is None:
        raise AuthenticationFailed("unknown email")
    if not security.tokens_match(token, user.authentication_token):
        raise AuthenticationFailed("token mismatch")
    return user

def get_current_active_user(
    token: Optional[str] = Security(token_header),
    email: Optional[str] = Security(email_header),
    db: Session = Depends(get_db),
) -> User:
    """
    API 경로 함수에서 사용되는 의존성 함수입니다.
    요청 헤더의 토큰과 이메일을 검증하고, 해당 사용자의 정보를 DB에서 조회하여 반환합니다.
    """
    try:
        return resolve_user(db, token, email)
    except AuthenticationFailed as exc:
        logger.warning("인증 실패 (email=%s): %s", email, exc.reason)
        raise
