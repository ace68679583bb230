"""
FastAPI 애플리케이션

라우터 등록 및 앱 설정.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config.loader import get_settings
from core.logging import setup_logging
from web.routes import health, journal, ledger, rules
from web.routes.health import API_VERSION


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 생명주기 관리"""
    settings = get_settings()

    # 로깅 설정 (콘솔 + 파일)
    setup_logging("web", level=settings.config.log_level)

    logger = logging.getLogger(__name__)
    logger.info(
        f"Web 시작: counter_account={settings.counter_account}, "
        f"tolerance={settings.tolerance}"
    )

    yield

    logger.info("Web 종료")


app = FastAPI(
    title="Bookkeeping API",
    description="복식부기 분개 / 총계정원장 생성 API",
    version=API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS 설정 (개발용)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =========================================================================
# API 라우터 등록
# =========================================================================

app.include_router(health.router)
app.include_router(rules.router)
app.include_router(journal.router)
app.include_router(ledger.router)
