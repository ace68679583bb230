"""
로깅 설정 유틸리티

Web과 배치 스크립트에서 사용하는 공통 로깅 설정.
- 콘솔: settings.yaml의 log_level (기본 INFO)
- 파일: 같은 레벨, 프로세스별 디렉토리에 일 단위 롤링 (선택)

사용법:
    from core.logging import setup_logging
    setup_logging("web", level="DEBUG")          # Web용 로거 설정
    setup_logging("script", log_to_file=False)   # 콘솔만 사용
"""

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from core.constants import Paths


LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_BACKUP_COUNT = 7  # 최대 7일치 파일 유지

# 요청/연결마다 로그를 남기는 외부 라이브러리 (WARNING으로 상향)
NOISY_LOGGERS = [
    "httpcore",
    "httpx",           # TestClient 요청
    "uvicorn.access",  # 요청마다 access 로그
    "multipart",       # 업로드 파싱
]


def parse_level(level: int | str) -> int:
    """로그 레벨 이름/숫자 → logging 상수 (알 수 없는 이름이면 INFO)"""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def get_log_file_path(process_name: str) -> Path:
    """프로세스별 로그 파일 경로 (logs/<process>/<process>.log)"""
    return Paths.LOGS_DIR / process_name / f"{process_name}.log"


def _console_handler(level: int, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def _file_handler(log_file: Path, level: int, formatter: logging.Formatter) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = TimedRotatingFileHandler(
        filename=log_file,
        when="midnight",
        interval=1,
        backupCount=LOG_FILE_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.suffix = "%Y-%m-%d"  # 백업 파일 형식: web.log.2026-02-21
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    process_name: str,
    level: int | str = logging.INFO,
    log_to_file: bool = True,
    log_dir: Path | None = None,
) -> logging.Logger:
    """루트 로거 초기화

    기존 핸들러는 제거하고 콘솔(+ 파일) 핸들러를 다시 등록.
    여러 번 호출해도 핸들러가 중복되지 않음.

    Args:
        process_name: 프로세스 이름 ("web" 또는 "script")
        level: 로그 레벨 (이름 또는 logging 상수)
        log_to_file: False면 콘솔만 사용
        log_dir: 로그 디렉토리 (None이면 Paths.LOGS_DIR/<process_name>)

    Returns:
        설정된 루트 Logger
    """
    resolved = parse_level(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved)
    root_logger.handlers.clear()
    root_logger.addHandler(_console_handler(resolved, formatter))

    log_file: Path | None = None
    if log_to_file:
        log_file = (log_dir / f"{process_name}.log") if log_dir else get_log_file_path(process_name)
        root_logger.addHandler(_file_handler(log_file, resolved, formatter))

    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    root_logger.info(
        f"로깅 초기화 완료: {process_name} "
        f"(level={logging.getLevelName(resolved)}, file={log_file or '-'})"
    )
    return root_logger
