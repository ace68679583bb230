"""
장부 세션

한 번의 작업(업로드 파일 하나) 동안의 가변 상태를 호출자가 소유.
원본 거래 → 분류 → 분개장 → 원장 → 검증 흐름을 묶어서 제공.
세션끼리 상태를 공유하지 않음 (동시 실행 시 세션을 각각 생성).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from core.constants import Defaults
from core.ledger.entry_builder import JournalEntryBuilder, JournalLine
from core.ledger.general_ledger import GeneralLedger
from core.ledger.transactions import (
    CategorizationStats,
    CategorizedTransaction,
    Transaction,
    categorize,
)
from core.ledger.types import AccountType
from core.ledger.validation import (
    BalanceCheck,
    EquationCheck,
    check_balance,
    check_equation,
)

logger = logging.getLogger(__name__)


class SessionStateError(Exception):
    """세션에 필요한 데이터가 없거나 대상이 없는 경우"""

    pass


class LedgerGenerationError(Exception):
    """원장 생성 단계 전체 실패 (부분 결과는 폐기)"""

    pass


@dataclass(frozen=True)
class LedgerReport:
    """원장 생성 결과"""

    ledger: GeneralLedger
    equation: EquationCheck
    journal_balance: BalanceCheck

    def to_dict(self) -> dict[str, Any]:
        return {
            "accounts": [a.to_dict() for a in self.ledger.sorted_accounts()],
            "chart_of_accounts": self.ledger.chart_to_dict(),
            "equation": self.equation.to_dict(),
            "journal_balance": self.journal_balance.to_dict(),
            "account_count": len(self.ledger),
            "line_count": self.ledger.lines_posted,
        }


class BookkeepingSession:
    """장부 작업 세션

    사용 예시:
    ```python
    session = BookkeepingSession()
    session.load_records(rows)          # CSV 레코드
    stats = session.analyze()
    session.recategorize(3, "Asset")    # 운영자 수정
    journal = session.journal()
    report = session.generate_ledger()
    report.equation.is_balanced
    ```
    """

    def __init__(
        self,
        counter_account: str = Defaults.COUNTER_ACCOUNT,
        tolerance: Decimal = Defaults.BALANCE_TOLERANCE,
    ):
        self.counter_account = counter_account
        self.tolerance = tolerance
        self._builder = JournalEntryBuilder(counter_account)

        self._original: list[Transaction] = []
        self._categorized: list[CategorizedTransaction] = []
        self._imported_journal: list[JournalLine] | None = None
        self._report: LedgerReport | None = None

    @classmethod
    def from_config(cls, config: Any) -> BookkeepingSession:
        """BookkeepingConfig 또는 Settings에서 생성"""
        return cls(counter_account=config.counter_account, tolerance=config.tolerance)

    # =====================================================================
    # 입력
    # =====================================================================

    def load_transactions(self, transactions: Iterable[Transaction]) -> int:
        """원본 거래 적재 (이전 파생 상태는 모두 폐기)"""
        self._original = list(transactions)
        self._categorized = []
        self._imported_journal = None
        self._report = None
        logger.info(f"거래 적재: {len(self._original)}건")
        return len(self._original)

    def load_records(self, records: Iterable[Mapping[str, Any]]) -> int:
        """CSV 컬럼명 기반 레코드 적재"""
        return self.load_transactions(Transaction.from_record(r) for r in records)

    def load_journal(self, lines: Iterable[JournalLine]) -> int:
        """이전에 내보낸 분개장 재입력 (원장 생성용)"""
        self._imported_journal = list(lines)
        self._report = None
        logger.info(f"분개장 적재: {len(self._imported_journal)}건")
        return len(self._imported_journal)

    # =====================================================================
    # 분류
    # =====================================================================

    def analyze(self) -> CategorizationStats:
        """전체 거래 분류 (운영자 수정 사항은 초기화됨)

        Raises:
            SessionStateError: 적재된 거래가 없는 경우
        """
        if not self._original:
            raise SessionStateError("분석할 거래가 없습니다. 거래를 먼저 적재하세요.")

        self._categorized, stats = categorize(self._original)
        self._report = None
        return stats

    @property
    def transactions(self) -> list[CategorizedTransaction]:
        return self._categorized

    @property
    def stats(self) -> CategorizationStats:
        """현재 분류 상태 통계 (운영자 수정 반영)"""
        return CategorizationStats.from_transactions(self._categorized)

    def _get(self, index: int) -> CategorizedTransaction:
        if not 0 <= index < len(self._categorized):
            raise SessionStateError(f"거래를 찾을 수 없습니다: index={index}")
        return self._categorized[index]

    def recategorize(self, index: int, category: AccountType | str | None) -> CategorizedTransaction:
        """최종 분류 변경 (차/대변 재계산)

        Raises:
            SessionStateError: index가 범위를 벗어난 경우
            ValueError: 알 수 없는 계정 유형
        """
        item = self._get(index)
        item.recategorize(category)
        self._report = None
        logger.info(
            f"분류 변경: index={index}, category={item.account_type}, side={item.side}"
        )
        return item

    def set_note(self, index: int, note: str) -> CategorizedTransaction:
        """분개 메모 변경"""
        item = self._get(index)
        item.journal_note = note
        self._report = None
        return item

    def reset(self) -> None:
        """파생 상태 폐기 후 원본 거래에서 다시 분류"""
        self._imported_journal = None
        self._report = None
        if self._original:
            self._categorized, _ = categorize(self._original)
        else:
            self._categorized = []

    # =====================================================================
    # 분개 / 원장
    # =====================================================================

    def journal(self) -> list[JournalLine]:
        """현재 분류 상태로 분개장 생성 (재입력 분개장이 있으면 그것을 사용)"""
        if self._imported_journal is not None:
            return list(self._imported_journal)
        return self._builder.build(self._categorized)

    def check_balance(self) -> BalanceCheck:
        return check_balance(self.journal(), self.tolerance)

    def generate_ledger(self) -> LedgerReport:
        """분개장을 새 원장에 게시하고 회계 등식 검증

        실패 시 이전 결과를 유지하고 LedgerGenerationError 하나로 보고.

        Raises:
            SessionStateError: 게시할 분개가 없는 경우
            LedgerGenerationError: 게시/검증 중 예기치 않은 오류
        """
        lines = self.journal()
        if not lines:
            raise SessionStateError(
                "게시할 분개가 없습니다. 거래를 분류하거나 분개장을 먼저 적재하세요."
            )

        try:
            ledger = GeneralLedger().post_journal(lines)
            report = LedgerReport(
                ledger=ledger,
                equation=check_equation(ledger, self.tolerance),
                journal_balance=check_balance(lines, self.tolerance),
            )
        except Exception as e:
            logger.exception("원장 생성 실패")
            raise LedgerGenerationError(f"원장 생성 실패: {e}") from e

        self._report = report
        logger.info(
            f"원장 생성 완료: accounts={len(ledger)}, lines={ledger.lines_posted}, "
            f"balanced={report.equation.is_balanced}"
        )
        return report

    @property
    def report(self) -> LedgerReport | None:
        """마지막 원장 생성 결과 (입력/분류가 바뀌면 None)"""
        return self._report
