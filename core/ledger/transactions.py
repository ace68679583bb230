"""
거래 모델 및 분류 단계

원본 거래 레코드 → 분류된 거래 (계정 유형, 차/대변, 분개 메모)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any

import pandas as pd

from core.constants import ExportColumns
from core.ledger.classifier import classify, match_account
from core.ledger.rules import side_for
from core.ledger.types import AccountType, JournalSide

logger = logging.getLogger(__name__)


def parse_amount(value: Any) -> Decimal:
    """금액 파싱 (빈 값/잘못된 값은 0)

    "$1,200.50", "-500", 12.5 등을 허용.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value if value.is_finite() else Decimal("0")

    text = str(value).strip().replace(",", "").replace("$", "")
    if not text:
        return Decimal("0")
    try:
        amount = Decimal(text)
    except InvalidOperation:
        return Decimal("0")
    return amount if amount.is_finite() else Decimal("0")


@dataclass(frozen=True)
class Transaction:
    """원본 거래 한 건

    amount의 부호는 해당 계정 잔액의 증가(+)/감소(-)를 의미.
    인식하지 못한 컬럼은 extra에 그대로 보관.
    """

    date: str
    account: str
    amount: Decimal
    description: str = ""
    vendor_or_customer: str = ""
    payment_method: str = ""
    transaction_id: str | None = None
    extra: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Transaction:
        """CSV 컬럼명 기반 레코드에서 생성"""

        def text(key: str) -> str:
            value = record.get(key)
            return "" if value is None else str(value)

        known = set(ExportColumns.TRANSACTION_INPUT)
        trans_id = text(ExportColumns.TRANS_ID).strip()

        return cls(
            date=text(ExportColumns.DATE),
            account=text(ExportColumns.ACCOUNT),
            amount=parse_amount(record.get(ExportColumns.AMOUNT)),
            description=text(ExportColumns.DESCRIPTION),
            vendor_or_customer=text(ExportColumns.VENDOR_CUSTOMER),
            payment_method=text(ExportColumns.PAYMENT_METHOD),
            transaction_id=trans_id or None,
            extra={
                str(k): "" if v is None else str(v)
                for k, v in record.items()
                if k not in known
            },
        )

    @property
    def magnitude(self) -> Decimal:
        """게시 금액 (절대값)"""
        return abs(self.amount)


def generate_journal_note(transaction: Transaction, account_type: AccountType | None) -> str:
    """분개 기본 메모 생성 (운영자가 수정 가능)"""
    description = transaction.description.lower()
    negative = transaction.amount < 0

    match account_type:
        case AccountType.REVENUE:
            return "Revenue adjustment" if negative else f"Revenue from {description}"
        case AccountType.EXPENSE:
            return f"Payment for {description}" if negative else "Expense refund"
        case AccountType.ASSET:
            return f"Purchase of {description}" if negative else f"Sale of {description}"
        case AccountType.LIABILITY:
            return "Loan payment" if negative else "Loan received"
        case AccountType.EQUITY:
            return "Owner withdrawal" if negative else "Owner investment"
        case _:
            return transaction.description or "Transaction entry"


@dataclass
class CategorizedTransaction:
    """분류된 거래

    account_type은 최종 분류 (운영자 수정값이 제안값보다 우선).
    side는 항상 원본 부호 있는 금액으로 규칙 테이블을 다시 적용해 계산.
    needs_review는 테이블/키워드 일치 없이 기본값(Expense)으로 제안된 경우 True,
    운영자가 분류를 확정하면 False.
    """

    transaction: Transaction
    index: int
    suggested_category: AccountType
    account_type: AccountType | None
    side: JournalSide | None
    journal_note: str = ""
    needs_review: bool = False

    @property
    def is_categorized(self) -> bool:
        return self.account_type is not None

    @property
    def is_uncategorized(self) -> bool:
        """운영자 검토 대상 (최종 분류 없음 또는 기본값 제안)"""
        return self.account_type is None or self.needs_review

    @property
    def amount(self) -> Decimal:
        return self.transaction.amount

    def recategorize(self, category: AccountType | str | None) -> None:
        """최종 분류 변경 (빈 값이면 미분류로 되돌림)

        분류가 바뀌면 차/대변을 원본 금액 부호로 다시 계산.
        """
        if category is None or (isinstance(category, str) and not category.strip()):
            self.account_type = None
            self.side = None
            self.needs_review = False
            return

        parsed = AccountType.parse(category)
        if parsed is None:
            raise ValueError(f"알 수 없는 계정 유형: {category!r}")

        self.account_type = parsed
        self.side = side_for(parsed, self.transaction.amount)
        self.needs_review = False

    def to_dict(self) -> dict[str, Any]:
        t = self.transaction
        return {
            "index": self.index,
            "date": t.date,
            "account": t.account,
            "amount": str(t.amount),
            "description": t.description,
            "vendor_or_customer": t.vendor_or_customer,
            "payment_method": t.payment_method,
            "transaction_id": t.transaction_id,
            "suggested_category": self.suggested_category.value,
            "final_category": self.account_type.value if self.account_type else None,
            "debit_or_credit": self.side.value if self.side else None,
            "journal_note": self.journal_note,
            "is_categorized": self.is_categorized,
            "needs_review": self.needs_review,
        }


@dataclass
class CategorizationStats:
    """분류 통계 (운영자 검토용)

    uncategorized: 최종 분류가 없거나 기본값(Expense)으로만 제안된 거래 수.
    기본값 제안 거래는 유형별 카운트(expense)에 포함하지 않음.
    """

    total: int = 0
    asset: int = 0
    liability: int = 0
    equity: int = 0
    revenue: int = 0
    expense: int = 0
    uncategorized: int = 0

    def count(self, item: CategorizedTransaction) -> None:
        self.total += 1
        if item.is_uncategorized:
            self.uncategorized += 1
            return
        attr = item.account_type.name.lower()
        setattr(self, attr, getattr(self, attr) + 1)

    @classmethod
    def from_transactions(cls, items: Iterable[CategorizedTransaction]) -> CategorizationStats:
        """현재 분류 상태로 통계 재계산"""
        stats = cls()
        for item in items:
            stats.count(item)
        return stats

    def to_dict(self) -> dict[str, int]:
        return {
            "total": self.total,
            "asset": self.asset,
            "liability": self.liability,
            "equity": self.equity,
            "revenue": self.revenue,
            "expense": self.expense,
            "uncategorized": self.uncategorized,
        }


def categorize_one(transaction: Transaction, index: int) -> CategorizedTransaction:
    """거래 한 건 분류 (일치 없는 계정은 Expense 제안 + 검토 대상)"""
    matched = match_account(transaction.account)
    suggested = matched or classify(transaction.account)
    return CategorizedTransaction(
        transaction=transaction,
        index=index,
        suggested_category=suggested,
        account_type=suggested,
        side=side_for(suggested, transaction.amount),
        journal_note=generate_journal_note(transaction, suggested),
        needs_review=matched is None,
    )


def categorize(
    transactions: Iterable[Transaction],
) -> tuple[list[CategorizedTransaction], CategorizationStats]:
    """전체 거래 분류

    Returns:
        (분류된 거래 목록, 분류 통계)
    """
    items: list[CategorizedTransaction] = []
    stats = CategorizationStats()

    for index, transaction in enumerate(transactions):
        item = categorize_one(transaction, index)
        stats.count(item)
        items.append(item)

    logger.info(
        f"거래 분류 완료: total={stats.total}, uncategorized={stats.uncategorized}, "
        f"revenue={stats.revenue}, expense={stats.expense}, asset={stats.asset}"
    )
    return items, stats


# =========================================================================
# 화면 표시용 필터/정렬
# =========================================================================

FILTER_ALL = "all"
FILTER_CATEGORIZED = "categorized"
FILTER_UNCATEGORIZED = "uncategorized"

SORT_KEYS = ("date", "amount", "account", "vendor")


def _date_key(value: str) -> tuple[bool, pd.Timestamp]:
    """날짜 정렬 키 (파싱 불가/빈 값은 맨 앞)

    "2024-01-05", "12/01/2024" 등 스프레드시트 표기를 각각 파싱.
    """
    parsed = pd.to_datetime(value.strip() or None, errors="coerce")
    if pd.isna(parsed):
        return (False, pd.Timestamp.min)
    if parsed.tzinfo is not None:
        parsed = parsed.tz_convert(None)
    return (True, parsed)


def filter_transactions(
    items: Iterable[CategorizedTransaction],
    kind: str = FILTER_ALL,
) -> list[CategorizedTransaction]:
    """분류 상태/유형으로 필터 (all, categorized, uncategorized, 또는 유형 이름)"""
    items = list(items)
    if kind == FILTER_ALL:
        return items
    if kind == FILTER_CATEGORIZED:
        return [t for t in items if not t.is_uncategorized]
    if kind == FILTER_UNCATEGORIZED:
        return [t for t in items if t.is_uncategorized]

    wanted = AccountType.parse(kind)
    return [t for t in items if wanted is not None and t.account_type is wanted]


def sort_transactions(
    items: Iterable[CategorizedTransaction],
    key: str | None = None,
) -> list[CategorizedTransaction]:
    """정렬 (date 시간순, amount 절대값 내림차순, account/vendor 이름순)

    알 수 없는 키는 원래 순서 유지.
    """
    items = list(items)
    match key:
        case "date":
            return sorted(items, key=lambda t: _date_key(t.transaction.date))
        case "amount":
            return sorted(items, key=lambda t: t.transaction.magnitude, reverse=True)
        case "account":
            return sorted(items, key=lambda t: t.transaction.account.lower())
        case "vendor":
            return sorted(items, key=lambda t: t.transaction.vendor_or_customer.lower())
        case _:
            return items
