from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, RedirectResponse
import logging
from database import engine, Base
from routers import favourites_router, user_router, products_router
from core.auth import AuthenticationFailed, AUTHENTICATION_FAILURE_PATH

logging.basicConfig(level=logging.INFO, format='%(levelname)s:     %(message)s')

Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="Favourites API",
    description="상품 즐겨찾기 API 서버입니다.",
    version="1.0.0",
)

# --- 라우터 등록 ---
app.include_router(user_router.router, prefix="/api/v1/users", tags=["users"])
app.include_router(products_router.router, prefix="/api/v1/products", tags=["products"])
app.include_router(favourites_router.router, prefix="/api/v1/favourites", tags=["favourites"])


# --- 인증 실패 처리 ---
# 자격 증명이 없거나 틀린 요청은 JSON 에러 대신 인증 실패 경로로 리다이렉트됩니다.
@app.exception_handler(AuthenticationFailed)
async def redirect_authentication_failure(request: Request, exc: AuthenticationFailed):
    return RedirectResponse(url=AUTHENTICATION_FAILURE_PATH, status_code=status.HTTP_302_FOUND)


@app.get(AUTHENTICATION_FAILURE_PATH, tags=["users"], summary="인증 실패 안내")
def authentication_failure():
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"error": "인증에 실패했습니다. X-User-Token, X-User-Email 헤더를 확인하세요."},
    )
