"""
균형 검증

- 분개장 차대 균형: 차변 합계 = 대변 합계
- 회계 등식: 자산 = 부채 + 자본 (+ 당기순이익)

불균형은 예외가 아니라 결과 데이터로 보고.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from core.constants import Defaults
from core.ledger.entry_builder import JournalLine
from core.ledger.types import AccountType

if TYPE_CHECKING:
    from core.ledger.general_ledger import GeneralLedger

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BalanceCheck:
    """분개장 차대 균형 결과"""

    is_balanced: bool
    total_debits: Decimal
    total_credits: Decimal
    difference: Decimal

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_balanced": self.is_balanced,
            "total_debits": str(self.total_debits),
            "total_credits": str(self.total_credits),
            "difference": str(self.difference),
        }


def check_balance(
    lines: Iterable[JournalLine],
    tolerance: Decimal = Defaults.BALANCE_TOLERANCE,
) -> BalanceCheck:
    """차대 균형 검증

    비어 있는 쪽은 0으로 합산. 빈 분개장은 균형.
    부동소수점 오차 흡수를 위해 절대 허용 오차 사용 (기본 0.01).
    """
    total_debits = Decimal("0")
    total_credits = Decimal("0")

    for line in lines:
        if line.debit is not None:
            total_debits += line.debit
        if line.credit is not None:
            total_credits += line.credit

    difference = abs(total_debits - total_credits)
    result = BalanceCheck(
        is_balanced=difference < tolerance,
        total_debits=total_debits,
        total_credits=total_credits,
        difference=difference,
    )
    if not result.is_balanced:
        logger.warning(
            f"분개장 불균형: debits={total_debits}, credits={total_credits}, diff={difference}"
        )
    return result


@dataclass(frozen=True)
class LedgerTotals:
    """유형별 잔액 합계"""

    total_assets: Decimal
    total_liabilities: Decimal
    total_equity: Decimal  # 당기순이익 미포함
    total_revenue: Decimal
    total_expenses: Decimal

    @property
    def net_income(self) -> Decimal:
        return self.total_revenue - self.total_expenses

    @property
    def equity_with_net_income(self) -> Decimal:
        return self.total_equity + self.net_income

    def to_dict(self) -> dict[str, str]:
        return {
            "total_assets": str(self.total_assets),
            "total_liabilities": str(self.total_liabilities),
            "total_equity": str(self.equity_with_net_income),
            "total_revenue": str(self.total_revenue),
            "total_expenses": str(self.total_expenses),
            "net_income": str(self.net_income),
        }


def calculate_totals(ledger: GeneralLedger) -> LedgerTotals:
    """계정 잔액을 유형별로 합산"""
    sums = {t: Decimal("0") for t in AccountType}
    for account in ledger:
        sums[account.category] += account.balance

    return LedgerTotals(
        total_assets=sums[AccountType.ASSET],
        total_liabilities=sums[AccountType.LIABILITY],
        total_equity=sums[AccountType.EQUITY],
        total_revenue=sums[AccountType.REVENUE],
        total_expenses=sums[AccountType.EXPENSE],
    )


@dataclass(frozen=True)
class EquationCheck:
    """회계 등식 검증 결과

    equity에는 당기순이익(수익 - 비용)이 포함됨.
    별도 결산/마감 단계 없이 자본에 합산하는 단순화.
    """

    is_balanced: bool
    assets: Decimal
    liabilities: Decimal
    equity: Decimal
    difference: Decimal
    totals: LedgerTotals

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_balanced": self.is_balanced,
            "assets": str(self.assets),
            "liabilities": str(self.liabilities),
            "equity": str(self.equity),
            "difference": str(self.difference),
            "totals": self.totals.to_dict(),
        }


def check_equation(
    ledger: GeneralLedger,
    tolerance: Decimal = Defaults.BALANCE_TOLERANCE,
) -> EquationCheck:
    """회계 등식 검증: |자산 - (부채 + 자본)| < 허용 오차"""
    totals = calculate_totals(ledger)
    assets = totals.total_assets
    liabilities = totals.total_liabilities
    equity = totals.equity_with_net_income

    difference = abs(assets - (liabilities + equity))
    result = EquationCheck(
        is_balanced=difference < tolerance,
        assets=assets,
        liabilities=liabilities,
        equity=equity,
        difference=difference,
        totals=totals,
    )
    if not result.is_balanced:
        logger.warning(
            f"회계 등식 불일치: assets={assets}, liabilities={liabilities}, "
            f"equity={equity}, diff={difference}"
        )
    return result
