# inventory_service/main.py

import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from inventory_service.core.config import settings
from inventory_service.core import dependencies as deps
from inventory_service.core.exceptions import CatalogError, StorageError
from inventory_service.domains.inv import crud as inv_crud
from inventory_service.domains.inv.routers import router as inv_router, forms_router
from inventory_service.utils.files import PhotoStore

logger = logging.getLogger(__name__)

# 이 목록 밖의 메서드는 어떤 경로든 405로 응답합니다.
ALLOWED_METHODS = {"GET", "POST", "PUT", "DELETE"}

ENDPOINT_NOT_FOUND = "Endpoint not found"
BAD_REQUEST = "Невірний запит"


def configure_logging() -> None:
    """설정의 로그 레벨로 루트 로거를 구성합니다."""
    logging.basicConfig(
        level=settings.effective_log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


# -- 애플리케이션 수명 주기 이벤트 핸들러 --
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    시작 시 캐시 디렉토리를 준비하고 카탈로그/사진 저장소를 생성하여 app.state에 할당합니다.
    캐시 디렉토리를 만들거나 접근할 수 없으면 시작을 중단합니다.
    """
    configure_logging()

    photo_store = PhotoStore(settings.CACHE_DIR)
    try:
        photo_store.ensure_directory()
    except StorageError as e:
        logger.critical("캐시 디렉토리 초기화 실패: %s", e.message)
        raise

    # 카탈로그는 메모리에만 존재하며 프로세스 종료와 함께 사라집니다.
    app.state.catalog = inv_crud.create_catalog()
    app.state.photo_store = photo_store

    logger.info("--- 서버 시작 ---")
    logger.info("http://%s:%s", settings.HOST, settings.PORT)
    logger.info("Swagger UI: http://%s:%s/docs", settings.HOST, settings.PORT)
    logger.info("Cache: %s", settings.CACHE_DIR)

    yield

    logger.info("서버 종료 (메모리 카탈로그 폐기)")


# -- FastAPI 애플리케이션 인스턴스 생성 --
app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


# -- 예외 핸들러 --
# 모든 오류 응답 본문은 {"error": <message>} 형식입니다.
@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if request.method not in ALLOWED_METHODS:
        return JSONResponse(
            status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
            content={"error": f"Method {request.method} not allowed"},
        )
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": ENDPOINT_NOT_FOUND})
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # 본문 형식이 잘못된 요청 (예: InventoryName이 문자열이 아님)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": BAD_REQUEST})


# -- 도메인 라우터 포함 --
app.include_router(inv_router)
app.include_router(forms_router)


# -- 루트 엔드포인트 --
@app.get("/", summary="API Root", response_description="Welcome message and documentation link.")
async def read_root():
    return {"message": f"Welcome to {settings.APP_NAME}. Visit /docs for interactive API documentation."}


# -- 헬스 체크 엔드포인트 --
@app.get("/health-check", summary="Health Check", response_description="Status of the application and cache directory.")
async def health_check(photo_store: PhotoStore = Depends(deps.get_photo_store)):
    """
    캐시 디렉토리에 접근 가능한지 확인합니다. 실패하면 500을 반환합니다.
    """
    photo_store.ensure_directory()
    return {"status": "ok", "cache_dir": str(photo_store.directory)}
