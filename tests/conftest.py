"""
pytest 공통 fixture 정의

장부 엔진 테스트용 거래 레코드, 분개장, 설정 파일 fixture
"""

import tempfile
from decimal import Decimal
from pathlib import Path
from typing import Any

import pytest

from core.config.loader import Settings
from core.ledger.entry_builder import JournalLine
from core.ledger.transactions import Transaction


@pytest.fixture(autouse=True)
def reset_settings() -> None:
    """각 테스트 후 Settings 싱글턴 초기화"""
    yield
    Settings.reset()


@pytest.fixture
def temp_dir() -> Path:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_settings_file(temp_dir: Path) -> Path:
    """테스트용 settings.yaml 파일 생성"""
    settings_content = """# 테스트용 settings.yaml
ledger:
  counter_account: Bank Account
  tolerance: 0.05

web:
  host: 0.0.0.0
  port: 9000

log_level: debug
"""
    settings_path = temp_dir / "settings.yaml"
    settings_path.write_text(settings_content, encoding="utf-8")
    return settings_path


@pytest.fixture
def sample_records() -> list[dict[str, Any]]:
    """CSV 컬럼명 기반 거래 레코드 (5개 유형 각 1건)

    상대 계정 Cash 기준:
    - Cash 차변 합계 14000
    - 자산 13700, 부채 2000, 자본 10000 + 당기순이익 1700
    """
    return [
        {
            "Date": "2024-01-01",
            "Account": "Owner's Equity",
            "Amount": "10000",
            "Description": "Initial investment",
            "Vendor_Customer": "Owner",
            "Payment_Method": "Bank Transfer",
            "Trans_ID": "T001",
        },
        {
            "Date": "2024-01-05",
            "Account": "Rent Expense",
            "Amount": "-500",
            "Description": "Office rent",
            "Vendor_Customer": "Landlord LLC",
            "Payment_Method": "Bank Transfer",
            "Trans_ID": "T002",
        },
        {
            "Date": "2024-01-10",
            "Account": "Service Revenue",
            "Amount": "1,200.00",
            "Description": "Consulting",
            "Vendor_Customer": "Acme Corp",
            "Payment_Method": "Card",
            "Trans_ID": "T003",
        },
        {
            "Date": "2024-01-15",
            "Account": "Equipment",
            "Amount": "-300",
            "Description": "Laptop",
            "Vendor_Customer": "Computer Store",
            "Payment_Method": "Card",
            "Trans_ID": "T004",
        },
        {
            "Date": "2024-01-20",
            "Account": "Loans Payable",
            "Amount": "$2000",
            "Description": "Bank loan",
            "Vendor_Customer": "First Bank",
            "Payment_Method": "Bank Transfer",
            "Trans_ID": "T005",
        },
    ]


@pytest.fixture
def sample_transactions(sample_records: list[dict[str, Any]]) -> list[Transaction]:
    return [Transaction.from_record(r) for r in sample_records]


@pytest.fixture
def sample_csv_text() -> str:
    """스프레드시트에서 내보낸 거래 CSV"""
    return (
        "Date,Account,Amount,Description,Vendor_Customer,Payment_Method,Trans_ID\n"
        "2024-01-01,Owner's Equity,10000,Initial investment,Owner,Bank Transfer,T001\n"
        "2024-01-05,Rent Expense,-500,Office rent,Landlord LLC,Bank Transfer,T002\n"
        '2024-01-10,Service Revenue,"1,200.00",Consulting,Acme Corp,Card,T003\n'
        "\n"
        ",,,,,,\n"
    )


@pytest.fixture
def balanced_journal() -> list[JournalLine]:
    """차대 균형 분개장 (자산 1000 = 부채 400 + 자본 600)"""

    def line(account: str, debit: str | None, credit: str | None, category: str) -> JournalLine:
        return JournalLine(
            date="2024-02-01",
            account=account,
            debit=Decimal(debit) if debit is not None else None,
            credit=Decimal(credit) if credit is not None else None,
            description="Opening",
            category=category,
        )

    return [
        line("Cash", "1000", None, "Asset"),
        line("Loans Payable", None, "400", "Liability"),
        line("Common Stock", None, "600", "Equity"),
    ]
