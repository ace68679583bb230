"""
차변/대변 규칙

계정 유형과 부호 있는 금액으로 분개 방향 결정
"""

import logging
from decimal import Decimal

from core.ledger.types import AccountType, JournalSide

logger = logging.getLogger(__name__)


def side_for(account_type: AccountType | str | None, amount: Decimal) -> JournalSide:
    """분개 방향 결정

    | 유형                         | amount >= 0 | amount < 0 |
    |------------------------------|-------------|------------|
    | Asset, Expense               | debit       | credit     |
    | Liability, Equity, Revenue   | credit      | debit      |

    금액의 부호만 사용 (0은 증가로 취급).
    알 수 없는 유형은 경고 후 debit 반환 (처리 중단 없음).
    """
    parsed = AccountType.parse(account_type)
    decrease = amount < 0

    match parsed:
        case AccountType.ASSET | AccountType.EXPENSE:
            return JournalSide.CREDIT if decrease else JournalSide.DEBIT
        case AccountType.LIABILITY | AccountType.EQUITY | AccountType.REVENUE:
            return JournalSide.DEBIT if decrease else JournalSide.CREDIT
        case _:
            logger.warning(f"알 수 없는 계정 유형: {account_type!r} → debit 기본값 사용")
            return JournalSide.DEBIT


def counter_account_for(
    account_type: AccountType,
    side: JournalSide,
    counter_account: str,
) -> str:
    """상대 계정 결정

    현재는 유형/방향과 무관하게 현금성 계정 하나로 고정.
    부채 증가가 차입인지 외상 매입인지 구분하지 않음.
    """
    # TODO: 유형/방향별 상대 계정 매핑 (예: 외상 매입 → Accounts Payable)
    return counter_account


def rules_explanation() -> dict[str, list[str]]:
    """차변/대변 규칙 설명 (화면 표시용)"""
    return {
        "debit_rules": [
            "Increase in Assets",
            "Increase in Expenses",
            "Decrease in Liabilities",
            "Decrease in Equity",
            "Decrease in Revenue",
        ],
        "credit_rules": [
            "Decrease in Assets",
            "Decrease in Expenses",
            "Increase in Liabilities",
            "Increase in Equity",
            "Increase in Revenue",
        ],
    }
