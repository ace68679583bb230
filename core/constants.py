"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from decimal import Decimal
from pathlib import Path


# 프로젝트 루트 (이 파일 기준 2단계 상위: core/constants.py → 프로젝트 루트)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent


class Defaults:
    """기본값 상수"""

    # 모든 분개의 상대 계정 (현금성 계정 하나로 고정)
    COUNTER_ACCOUNT: str = "Cash"

    # 차대 균형 / 회계 등식 허용 오차 (절대값)
    BALANCE_TOLERANCE: Decimal = Decimal("0.01")

    WEB_HOST: str = "127.0.0.1"
    WEB_PORT: int = 8000

    LOG_LEVEL: str = "INFO"


class Paths:
    """프로젝트 경로 상수 (pathlib 사용 - OS 독립적)"""

    # 디렉토리
    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    DATA_DIR: Path = PROJECT_ROOT / "data"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"
    EXPORT_DIR: Path = DATA_DIR / "exports"

    # 설정 파일
    SETTINGS_FILE: Path = CONFIG_DIR / "settings.yaml"


class ExportColumns:
    """CSV 입출력 컬럼명 (외부 스프레드시트 호환)"""

    # 거래 입력
    DATE: str = "Date"
    ACCOUNT: str = "Account"
    AMOUNT: str = "Amount"
    DESCRIPTION: str = "Description"
    VENDOR_CUSTOMER: str = "Vendor_Customer"
    PAYMENT_METHOD: str = "Payment_Method"
    TRANS_ID: str = "Trans_ID"

    TRANSACTION_INPUT: tuple[str, ...] = (
        DATE, ACCOUNT, AMOUNT, DESCRIPTION, VENDOR_CUSTOMER, PAYMENT_METHOD, TRANS_ID,
    )

    # 분개장
    DEBIT: str = "Debit"
    CREDIT: str = "Credit"
    CATEGORY: str = "Category"

    JOURNAL: tuple[str, ...] = (DATE, ACCOUNT, DEBIT, CREDIT, DESCRIPTION, CATEGORY)

    # 총계정원장 요약
    LEDGER: tuple[str, ...] = (
        "Account",
        "Category",
        "Total Debits",
        "Total Credits",
        "Balance",
        "Transaction Count",
    )
    EQUATION_MARKER: str = "ACCOUNTING EQUATION VALIDATION"
