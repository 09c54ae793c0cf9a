# /backend/healthapp/main.py

from __future__ import annotations
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from healthapp import models  # noqa: F401  (테이블 메타데이터 등록)
from healthapp.api.routers import auth, user, content
from healthapp.config import Settings
from healthapp.db import make_engine, make_sessionmaker, create_tables
from healthapp.errors import register_error_handlers

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # 앱 시작 시: 엔진 생성 + 테이블 준비
        engine = make_engine(settings.database_url)
        app.state.engine = engine
        app.state.sessionmaker = make_sessionmaker(engine)
        await create_tables(engine)
        logger.info("Database ready")
        try:
            yield
        finally:
            # 앱 종료 시
            await engine.dispose()

    app = FastAPI(
        title="Prakriti Health Profile API",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # CORS 미들웨어를 가장 먼저 등록
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(auth.router)
    app.include_router(user.router)
    app.include_router(content.router)

    @app.get("/health")
    async def health():
        return {"ok": True}

    return app
