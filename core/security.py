# -*- coding: utf-8 -*-
"""
보안 관련 유틸리티 모듈

비밀번호 해싱과 인증 토큰 발급처럼 보안과 직접적으로 관련된 함수들을 모아놓은 곳입니다.
인증(core.auth)이나 데이터베이스 처리(crud) 등 다른 모듈에서 이 함수들을 가져와 사용합니다.
"""

import hmac
import os
import secrets

from passlib.context import CryptContext

# --- 비밀번호 암호화 컨텍스트 설정 ---
# schemes=["bcrypt"]: 사용할 해싱 알고리즘을 bcrypt로 지정합니다.
# deprecated="auto": 구 버전의 해시 형식이 발견되면, 새로운 형식으로 자동 업데이트하도록 설정합니다.
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# 인증 토큰에 사용할 난수 바이트 수 (15바이트 -> 20자 url-safe 문자열)
AUTH_TOKEN_BYTES = int(os.getenv("AUTH_TOKEN_BYTES", "15"))


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    입력된 평문 비밀번호와 데이터베이스에 저장된 해시된 비밀번호를 비교합니다.

    Args:
        plain_password (str): 사용자가 로그인 시 입력한 비밀번호 원문.
        hashed_password (str): 데이터베이스에 저장되어 있는, 해싱된 비밀번호.

    Returns:
        bool: 비밀번호가 일치하면 True, 그렇지 않으면 False를 반환합니다.
    """
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password: str) -> str:
    """평문 비밀번호를 받아 bcrypt 알고리즘으로 해싱하여 반환합니다."""
    return pwd_context.hash(password)

def generate_authentication_token() -> str:
    """X-User-Token 헤더로 사용할 새 인증 토큰을 생성합니다."""
    return secrets.token_urlsafe(AUTH_TOKEN_BYTES)

def tokens_match(given: str, expected: str) -> bool:
    """타이밍 공격을 피하기 위해 일정 시간 비교를 사용합니다."""
    return hmac.compare_digest(given.encode("utf-8"), expected.encode("utf-8"))
