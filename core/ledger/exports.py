"""
내보내기 행 생성

분개장/총계정원장을 스프레드시트 호환 행 목록으로 변환.
바이트 인코딩(CSV 파일 쓰기)은 adapters.csv_io 담당.
"""

from collections.abc import Iterable
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from core.constants import ExportColumns
from core.ledger.entry_builder import JournalLine
from core.ledger.general_ledger import GeneralLedger
from core.ledger.types import CATEGORY_BADGES, NEUTRAL_BADGE, AccountType
from core.ledger.validation import EquationCheck

Row = list[str]

_CENT = Decimal("0.01")


def format_money(value: Decimal | None) -> str:
    """금액 표시 (소수점 2자리, None은 빈 문자열)"""
    if value is None:
        return ""
    return str(Decimal(value).quantize(_CENT, rounding=ROUND_HALF_UP))


def category_badge(category: str | AccountType | None) -> str:
    """유형 배지 스타일 (5개 유형 값과 정확히 일치할 때만, 그 외는 중립 스타일)"""
    try:
        account_type = AccountType(category)
    except ValueError:
        return NEUTRAL_BADGE
    return CATEGORY_BADGES[account_type]


def journal_rows(lines: Iterable[JournalLine]) -> list[Row]:
    """분개장 → 행 목록 (헤더 포함)

    Date, Account, Debit, Credit, Description, Category
    """
    rows: list[Row] = [list(ExportColumns.JOURNAL)]
    for line in lines:
        rows.append([
            line.date,
            line.account,
            format_money(line.debit),
            format_money(line.credit),
            line.description,
            line.category,
        ])
    return rows


def ledger_rows(ledger: GeneralLedger, equation: EquationCheck) -> list[Row]:
    """총계정원장 요약 + 회계 등식 검증 블록 → 행 목록"""
    rows: list[Row] = [list(ExportColumns.LEDGER)]
    for account in ledger:
        rows.append([
            account.name,
            account.category.value,
            format_money(account.total_debits),
            format_money(account.total_credits),
            format_money(account.balance),
            str(account.transaction_count),
        ])

    rows.append([])
    rows.append([ExportColumns.EQUATION_MARKER])
    rows.append(["Assets", f"${format_money(equation.assets)}"])
    rows.append(["Liabilities", f"${format_money(equation.liabilities)}"])
    rows.append(["Equity", f"${format_money(equation.equity)}"])
    rows.append(["Status", "BALANCED" if equation.is_balanced else "NOT BALANCED"])
    return rows


def journal_filename(today: date | None = None) -> str:
    return f"journal_entries_{(today or date.today()).isoformat()}.csv"


def ledger_filename(today: date | None = None) -> str:
    return f"general_ledger_{(today or date.today()).isoformat()}.csv"
