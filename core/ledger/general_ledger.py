"""
총계정원장

분개 항목을 계정별로 순서대로 게시하여 합계와 잔액을 누적.

사용 예시:
```python
ledger = GeneralLedger()
ledger.post_journal(lines)

cash = ledger["Cash"]
cash.balance            # 차변 - 대변 (Asset)
ledger.chart_of_accounts[AccountType.ASSET]  # {"Cash": Decimal(...)}
```
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from core.ledger.classifier import classify
from core.ledger.entry_builder import JournalLine
from core.ledger.types import DEBIT_NORMAL_TYPES, AccountType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PostedLine:
    """계정에 게시된 항목 (balance = 게시 직후 누적 잔액)"""

    date: str
    transaction_id: str | None
    description: str
    debit: Decimal
    credit: Decimal
    balance: Decimal

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "transaction_id": self.transaction_id,
            "description": self.description,
            "debit": str(self.debit),
            "credit": str(self.credit),
            "balance": str(self.balance),
        }


@dataclass
class LedgerAccount:
    """계정별 원장

    잔액 부호:
    - Asset/Expense: 차변 합계 - 대변 합계
    - Liability/Equity/Revenue: 대변 합계 - 차변 합계
    """

    name: str
    category: AccountType
    posted_lines: list[PostedLine] = field(default_factory=list)
    total_debits: Decimal = Decimal("0")
    total_credits: Decimal = Decimal("0")
    balance: Decimal = Decimal("0")

    def apply(self, line: JournalLine) -> PostedLine:
        """항목 하나 게시 (합계 누적 → 잔액 재계산 → 이력 추가)"""
        debit = line.debit or Decimal("0")
        credit = line.credit or Decimal("0")

        self.total_debits += debit
        self.total_credits += credit
        self.balance = self._compute_balance()

        posted = PostedLine(
            date=line.date,
            transaction_id=line.transaction_id,
            description=line.description,
            debit=debit,
            credit=credit,
            balance=self.balance,
        )
        self.posted_lines.append(posted)
        return posted

    def _compute_balance(self) -> Decimal:
        if self.category in DEBIT_NORMAL_TYPES:
            return self.total_debits - self.total_credits
        return self.total_credits - self.total_debits

    @property
    def transaction_count(self) -> int:
        return len(self.posted_lines)

    def to_dict(self, include_lines: bool = True) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "category": self.category.value,
            "total_debits": str(self.total_debits),
            "total_credits": str(self.total_credits),
            "balance": str(self.balance),
            "transaction_count": self.transaction_count,
        }
        if include_lines:
            data["posted_lines"] = [p.to_dict() for p in self.posted_lines]
        return data


class GeneralLedger:
    """총계정원장

    계정 이름 → LedgerAccount. 처음 게시될 때 계정 생성, 이후 누적.
    계정과목표(chart of accounts)는 게시할 때마다 함께 갱신.

    게시 순서는 계정별 이력 순서에만 영향을 주고 최종 합계/잔액에는 영향 없음.
    """

    def __init__(self) -> None:
        self._accounts: dict[str, LedgerAccount] = {}
        self._chart: dict[AccountType, dict[str, Decimal]] = {t: {} for t in AccountType}
        self.lines_posted = 0

    # =====================================================================
    # 게시
    # =====================================================================

    def post(self, line: JournalLine) -> LedgerAccount:
        """분개 항목 하나 게시

        항목 단위로 거부하지 않음 (차대 불균형은 분개장/원장 전체 단위로 검증).
        """
        account = self._accounts.get(line.account)
        if account is None:
            category = AccountType.parse(line.category) or classify(line.account)
            account = LedgerAccount(name=line.account, category=category)
            self._accounts[line.account] = account
            logger.debug(f"계정 생성: {line.account} ({category.value})")

        posted = account.apply(line)
        self._chart[account.category][account.name] = account.balance
        self.lines_posted += 1

        logger.debug(
            f"게시: {account.name} debit={posted.debit} credit={posted.credit} "
            f"balance={posted.balance}"
        )
        return account

    def post_journal(self, lines: Iterable[JournalLine]) -> GeneralLedger:
        """분개장 전체를 순서대로 게시 (기존 상태에 이어서 누적)"""
        for line in lines:
            self.post(line)
        return self

    # =====================================================================
    # 조회
    # =====================================================================

    @property
    def accounts(self) -> dict[str, LedgerAccount]:
        return self._accounts

    @property
    def chart_of_accounts(self) -> dict[AccountType, dict[str, Decimal]]:
        """유형별 계정 잔액 (원장에서 파생된 비정규화 뷰)"""
        return self._chart

    def __getitem__(self, name: str) -> LedgerAccount:
        return self._accounts[name]

    def __contains__(self, name: object) -> bool:
        return name in self._accounts

    def __iter__(self) -> Iterator[LedgerAccount]:
        return iter(self._accounts.values())

    def __len__(self) -> int:
        return len(self._accounts)

    def sorted_accounts(self) -> list[LedgerAccount]:
        """이름순 계정 목록 (화면 표시용)"""
        return [self._accounts[name] for name in sorted(self._accounts)]

    def chart_to_dict(self) -> dict[str, dict[str, str]]:
        return {
            account_type.value: {name: str(balance) for name, balance in accounts.items()}
            for account_type, accounts in self._chart.items()
        }


def post_journal(lines: Iterable[JournalLine]) -> GeneralLedger:
    """새 원장에 분개장 게시"""
    ledger = GeneralLedger().post_journal(lines)
    logger.info(f"원장 게시 완료: accounts={len(ledger)}, lines={ledger.lines_posted}")
    return ledger
