"""
분개 생성기

분류된 거래를 복식부기 분개(차변/대변 쌍)로 변환
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from core.constants import Defaults, ExportColumns
from core.ledger.classifier import classify
from core.ledger.rules import counter_account_for
from core.ledger.transactions import CategorizedTransaction, parse_amount
from core.ledger.types import JournalSide

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JournalLine:
    """분개 항목

    한 계정에 대한 차변 또는 대변 한 쪽.
    생성기가 만든 항목은 debit/credit 중 정확히 하나만 값이 있음.
    외부 CSV에서 다시 읽은 항목은 비어 있을 수 있으며 게시 시 0으로 취급.
    """

    date: str
    account: str
    debit: Decimal | None
    credit: Decimal | None
    description: str
    category: str  # AccountType 값 (외부 입력은 임의 문자열일 수 있음)
    transaction_id: str | None = None

    @property
    def side(self) -> JournalSide | None:
        if self.debit is not None:
            return JournalSide.DEBIT
        if self.credit is not None:
            return JournalSide.CREDIT
        return None

    @property
    def magnitude(self) -> Decimal:
        return (self.debit or Decimal("0")) + (self.credit or Decimal("0"))

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> JournalLine:
        """분개장 CSV 레코드에서 생성 (재입력용)

        빈 Debit/Credit 셀은 None.
        """

        def text(key: str) -> str:
            value = record.get(key)
            return "" if value is None else str(value)

        def money(key: str) -> Decimal | None:
            raw = text(key).strip()
            return parse_amount(raw) if raw else None

        trans_id = text(ExportColumns.TRANS_ID).strip()
        return cls(
            date=text(ExportColumns.DATE),
            account=text(ExportColumns.ACCOUNT),
            debit=money(ExportColumns.DEBIT),
            credit=money(ExportColumns.CREDIT),
            description=text(ExportColumns.DESCRIPTION),
            category=text(ExportColumns.CATEGORY).strip(),
            transaction_id=trans_id or None,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "account": self.account,
            "debit": None if self.debit is None else str(self.debit),
            "credit": None if self.credit is None else str(self.credit),
            "description": self.description,
            "category": self.category,
            "transaction_id": self.transaction_id,
        }


def _line(
    date: str,
    account: str,
    side: JournalSide,
    amount: Decimal,
    description: str,
    category: str,
    transaction_id: str | None,
) -> JournalLine:
    return JournalLine(
        date=date,
        account=account,
        debit=amount if side is JournalSide.DEBIT else None,
        credit=amount if side is JournalSide.CREDIT else None,
        description=description,
        category=category,
        transaction_id=transaction_id,
    )


class JournalEntryBuilder:
    """분류된 거래를 분개로 변환

    거래 한 건 → 대상 계정 항목 + 상대 계정 항목 (같은 금액, 반대 방향).
    따라서 생성된 분개장 전체의 차변 합계 = 대변 합계.
    """

    def __init__(self, counter_account: str = Defaults.COUNTER_ACCOUNT):
        """
        Args:
            counter_account: 모든 거래의 상대 계정 (현금성 계정)
        """
        self.counter_account = counter_account

    def expand(self, item: CategorizedTransaction) -> tuple[JournalLine, JournalLine]:
        """거래 한 건 → (대상 항목, 상대 항목)

        Raises:
            ValueError: 미분류 거래인 경우 (build()는 미분류 거래를 건너뜀)
        """
        if item.account_type is None or item.side is None:
            raise ValueError(f"미분류 거래는 분개할 수 없습니다: index={item.index}")

        t = item.transaction
        amount = t.magnitude
        description = item.journal_note or t.description
        account_type = item.account_type

        subject = _line(
            date=t.date,
            account=t.account or account_type.value,
            side=item.side,
            amount=amount,
            description=description,
            category=account_type.value,
            transaction_id=t.transaction_id,
        )

        counter_name = counter_account_for(account_type, item.side, self.counter_account)
        counter = _line(
            date=t.date,
            account=counter_name,
            side=item.side.opposite,
            amount=amount,
            description=description,
            category=classify(counter_name).value,
            transaction_id=t.transaction_id,
        )

        return subject, counter

    def build(self, items: Iterable[CategorizedTransaction]) -> list[JournalLine]:
        """분개장 생성

        미분류 거래는 오류 없이 제외. 입력 순서 유지 (대상 항목 → 상대 항목).
        """
        lines: list[JournalLine] = []
        skipped = 0

        for item in items:
            if not item.is_categorized:
                skipped += 1
                continue
            lines.extend(self.expand(item))

        logger.info(f"분개 생성 완료: lines={len(lines)}, skipped={skipped}")
        return lines


def build_journal(
    items: Iterable[CategorizedTransaction],
    counter_account: str = Defaults.COUNTER_ACCOUNT,
) -> list[JournalLine]:
    """분개장 생성 (JournalEntryBuilder 단축 함수)"""
    return JournalEntryBuilder(counter_account).build(items)
