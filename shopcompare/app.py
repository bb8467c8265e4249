"""FastAPI 앱 팩토리"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shopcompare import __version__
from shopcompare.api import health_router, ranking_router
from shopcompare.core.config import settings
from shopcompare.core.exceptions import ShopCompareException, ValidationException
from shopcompare.core.logging import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기"""
    logger.info(f"Starting shopcompare {__version__}...")
    logger.info(
        f"Ranking config: threshold={settings.search_relevance_threshold} "
        f"relevance_weight={settings.search_relevance_weight} "
        f"aliases={'on' if settings.match_aliases_enabled else 'off'}"
    )
    yield
    logger.info("Shutting down shopcompare...")


async def handle_domain_error(request: Request, exc: ShopCompareException) -> JSONResponse:
    """라우트 밖으로 새어 나온 도메인 예외 → 공통 에러 봉투"""
    status_code = 400 if isinstance(exc, ValidationException) else 500
    logger.error(f"[API] {request.method} {request.url.path} failed: {exc}")
    return JSONResponse(
        status_code=status_code,
        content={
            "status": "error",
            "data": None,
            "message": exc.message,
            "error_code": exc.error_code,
        },
    )


def create_app() -> FastAPI:
    """
    FastAPI 앱 생성 (Factory Pattern)

    Returns:
        FastAPI 앱 인스턴스
    """
    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.add_exception_handler(ShopCompareException, handle_domain_error)

    app.include_router(health_router)
    app.include_router(ranking_router)

    return app


# uvicorn shopcompare.app:app
app = create_app()
