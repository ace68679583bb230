"""
설정 로더

settings.yaml 로드 및 장부 엔진 설정 생성
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

import yaml

from core.constants import Defaults, Paths


@dataclass(frozen=True)
class WebConfig:
    """Web 서버 설정"""

    host: str = Defaults.WEB_HOST
    port: int = Defaults.WEB_PORT


@dataclass(frozen=True)
class BookkeepingConfig:
    """장부 엔진 설정 (settings.yaml에서 로드)

    불변 데이터 구조로 설정 변경 방지
    """

    counter_account: str = Defaults.COUNTER_ACCOUNT
    tolerance: Decimal = Defaults.BALANCE_TOLERANCE
    log_level: str = Defaults.LOG_LEVEL
    web: WebConfig = WebConfig()


class ConfigLoadError(Exception):
    """설정 로드 실패 예외"""

    pass


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    """하위 섹션 (없으면 빈 매핑, 매핑이 아니면 ConfigLoadError)"""
    section = data.get(key)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigLoadError(f"settings.yaml의 {key}는 매핑이어야 합니다: {section!r}")
    return section


def load_settings(path: Path | None = None) -> BookkeepingConfig:
    """settings.yaml 파일 로드

    기본 경로에 파일이 없으면 기본값 사용.
    명시적으로 지정한 경로에 파일이 없으면 예외.

    Args:
        path: settings.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        BookkeepingConfig 인스턴스

    Raises:
        ConfigLoadError: 파일이 없거나 형식/값이 잘못된 경우
    """
    if path is None:
        path = Paths.SETTINGS_FILE
        if not path.exists():
            return BookkeepingConfig()

    if not path.exists():
        raise ConfigLoadError(f"settings.yaml 파일을 찾을 수 없습니다: {path}")

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"settings.yaml 파싱 실패: {e}") from e

    if data is None:
        return BookkeepingConfig()

    if not isinstance(data, dict):
        raise ConfigLoadError("settings.yaml 최상위는 매핑이어야 합니다")

    ledger_config = _section(data, "ledger")

    counter_account = str(ledger_config.get("counter_account", Defaults.COUNTER_ACCOUNT)).strip()
    if not counter_account:
        raise ConfigLoadError("settings.yaml의 ledger.counter_account가 비어 있습니다")

    raw_tolerance = ledger_config.get("tolerance", Defaults.BALANCE_TOLERANCE)
    try:
        tolerance = Decimal(str(raw_tolerance))
    except InvalidOperation as e:
        raise ConfigLoadError(
            f"유효하지 않은 tolerance입니다: '{raw_tolerance}'"
        ) from e
    if not tolerance.is_finite() or tolerance <= 0:
        raise ConfigLoadError(f"tolerance는 0보다 큰 유한한 값이어야 합니다: {tolerance}")

    web_config = _section(data, "web")
    try:
        port = int(web_config.get("port", Defaults.WEB_PORT))
    except (TypeError, ValueError) as e:
        raise ConfigLoadError(
            f"유효하지 않은 web.port입니다: '{web_config.get('port')}'"
        ) from e

    return BookkeepingConfig(
        counter_account=counter_account,
        tolerance=tolerance,
        log_level=str(data.get("log_level", Defaults.LOG_LEVEL)).upper(),
        web=WebConfig(
            host=str(web_config.get("host", Defaults.WEB_HOST)),
            port=port,
        ),
    )


class Settings:
    """애플리케이션 설정 (싱글턴 패턴)

    settings.yaml을 로드하고 관련 설정을 제공
    """

    _instance: "Settings | None" = None
    _config: BookkeepingConfig | None = None

    def __new__(cls, settings_path: Path | None = None) -> "Settings":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, settings_path: Path | None = None) -> None:
        if self._config is None:
            type(self)._config = load_settings(settings_path)

    @property
    def config(self) -> BookkeepingConfig:
        """전체 설정"""
        assert self._config is not None
        return self._config

    @property
    def counter_account(self) -> str:
        """상대 계정 이름"""
        return self.config.counter_account

    @property
    def tolerance(self) -> Decimal:
        """균형 허용 오차"""
        return self.config.tolerance

    @property
    def web(self) -> WebConfig:
        """Web 서버 설정"""
        return self.config.web

    @classmethod
    def reset(cls) -> None:
        """싱글턴 인스턴스 초기화 (테스트용)"""
        cls._instance = None
        cls._config = None


def get_settings(settings_path: Path | None = None) -> Settings:
    """Settings 인스턴스 반환

    Args:
        settings_path: settings.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Settings 싱글턴 인스턴스
    """
    return Settings(settings_path)
