"""
의존성 주입

FastAPI의 Depends를 사용한 의존성 관리.
"""

from fastapi import Depends

from core.config.loader import Settings, get_settings
from web.services.bookkeeping_service import BookkeepingService


def get_app_settings() -> Settings:
    """애플리케이션 설정 반환"""
    return get_settings()


def get_bookkeeping_service(
    settings: Settings = Depends(get_app_settings),
) -> BookkeepingService:
    """요청마다 새 BookkeepingService 반환"""
    return BookkeepingService(settings.config)
