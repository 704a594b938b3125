"""
Portfolio Q&A API 서버

실행:
    uvicorn portfolio_api.main:app --reload
    또는 python -m portfolio_api.main
"""
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from portfolio_api import config
from portfolio_api.logger import get_logger
from portfolio_api.routers import assistant_api
from portfolio_api.storage.catalog import DEFAULT_ANSWERS
from portfolio_api.storage.memory_storage import MemoryStorage

logger = get_logger(__name__)


def _validation_message(path: str, errors: list) -> str:
    """검증 실패 응답 메시지 (본문 검증 실패만 엔드포인트별 메시지)"""
    if not any(err["loc"][:1] == ["body"] for err in errors):
        return "Invalid request format"
    if path.rstrip("/").endswith("/feedback"):
        return "Invalid feedback format"
    if "/answers" in path:
        return "Invalid answer format"
    return "Invalid request format"


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """스키마 검증 실패 → 400 + 항목별 오류"""
    errors = [
        {"loc": list(err.get("loc", [])), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]
    logger.info(f"[validation] {request.method} {request.url.path}: {len(errors)}건")
    return JSONResponse(
        status_code=400,
        content={"message": _validation_message(request.url.path, errors), "errors": errors}
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """HTTPException → {"message": ...}"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None)
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    """예상하지 못한 오류 → 500"""
    logger.exception(f"❌ [{request.method} {request.url.path}] 처리되지 않은 오류: {exc}")
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


def _allow_origin(origin: Optional[str]) -> Optional[str]:
    if "*" in config.CORS_ORIGINS:
        return "*"
    if origin and origin in config.CORS_ORIGINS:
        return origin
    return None


def create_app(storage: Optional[MemoryStorage] = None) -> FastAPI:
    """
    앱 생성

    Args:
        storage: 사용할 저장소 (None이면 설정에 따라 기본 카탈로그로 새로 생성)

    Returns:
        FastAPI 앱
    """
    app = FastAPI(
        title=config.APP_TITLE,
        description="포트폴리오 질문 → 답변 매칭 / 분류 / 피드백 API",
        version=config.APP_VERSION
    )

    # Boot Once: 앱당 저장소 1개
    if storage is None:
        storage = MemoryStorage(DEFAULT_ANSWERS if config.SEED_ANSWERS else None)
    app.state.storage = storage

    # CORS 설정 (기본: 모든 출처 허용)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # OPTIONS는 어떤 경로든 200 + 빈 본문
    @app.middleware("http")
    async def handle_preflight(request: Request, call_next):
        logger.debug(f"Incoming request {request.method} {request.url.path}")
        if request.method == "OPTIONS":
            headers = {
                "Access-Control-Allow-Methods": "GET, POST, PATCH, OPTIONS",
                "Access-Control-Allow-Headers": "Content-Type",
            }
            allow_origin = _allow_origin(request.headers.get("origin"))
            if allow_origin:
                headers["Access-Control-Allow-Origin"] = allow_origin
            return Response(status_code=200, headers=headers)
        return await call_next(request)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(
        assistant_api.router,
        prefix=config.API_PREFIX,
        tags=["API"]
    )

    @app.get("/", tags=["Root"])
    def root():
        """API 루트 - 사용 가능한 엔드포인트 안내"""
        prefix = config.API_PREFIX
        return {
            "message": config.APP_TITLE,
            "version": config.APP_VERSION,
            "endpoints": {
                "questions": f"POST {prefix}/questions",
                "review_queue": f"GET {prefix}/questions/review",
                "answers": f"GET|POST {prefix}/answers",
                "answer_search": f"GET {prefix}/answers/search?q=",
                "feedback": f"GET|POST {prefix}/feedback",
                "answer_feedback": f"GET {prefix}/feedback/answer/{{answer_id}}"
            },
            "docs": {
                "swagger": "/docs",
                "redoc": "/redoc"
            }
        }

    @app.get("/health", tags=["Health"])
    def health_check():
        """서버 상태 확인"""
        return {"status": "healthy", "answers": len(app.state.storage.answers.list_answers())}

    logger.info(f"✅ [create_app] {config.APP_TITLE} 준비 완료")
    return app


app = create_app()


def run() -> None:
    """uvicorn 실행 (설정의 HOST/PORT 사용)"""
    uvicorn.run("portfolio_api.main:app", host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
