"""
장부 서비스

요청마다 독립된 BookkeepingSession을 만들어
분류 → 분개 → 원장 → 검증 결과를 응답 형태로 구성.
"""

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from adapters.spreadsheet.csv_io import rows_to_csv
from core.config.loader import BookkeepingConfig
from core.ledger.entry_builder import JournalLine
from core.ledger.exports import journal_rows, ledger_rows
from core.ledger.session import BookkeepingSession, LedgerReport, SessionStateError
from core.ledger.transactions import Transaction
from web.models.requests import OverrideRequest

logger = logging.getLogger(__name__)


class BookkeepingService:
    """장부 서비스

    상태를 보관하지 않음 (요청 간 공유 상태 없음).

    Args:
        config: 장부 엔진 설정 (상대 계정, 허용 오차)
    """

    def __init__(self, config: BookkeepingConfig):
        self.config = config

    def _new_session(self) -> BookkeepingSession:
        return BookkeepingSession.from_config(self.config)

    # =====================================================================
    # 분석 / 분개장
    # =====================================================================

    def analyze(
        self,
        transactions: Sequence[Transaction],
        overrides: Iterable[OverrideRequest] = (),
    ) -> BookkeepingSession:
        """거래 분류 후 운영자 수정 적용

        Raises:
            SessionStateError: 거래가 없거나 index가 범위를 벗어난 경우
            ValueError: 알 수 없는 계정 유형
        """
        session = self._new_session()
        session.load_transactions(transactions)
        session.analyze()

        for override in overrides:
            if override.category is not None:
                session.recategorize(override.index, override.category or None)
            if override.journal_note is not None:
                session.set_note(override.index, override.journal_note)

        return session

    def analysis_payload(self, session: BookkeepingSession) -> dict[str, Any]:
        journal = session.journal()
        return {
            "transactions": [t.to_dict() for t in session.transactions],
            "stats": session.stats.to_dict(),
            "journal": [line.to_dict() for line in journal],
            "balance": session.check_balance().to_dict(),
        }

    def journal_csv(
        self,
        transactions: Sequence[Transaction],
        overrides: Iterable[OverrideRequest] = (),
    ) -> str:
        """분개장 CSV

        Raises:
            SessionStateError: 분류된 거래가 없어 분개가 비어 있는 경우
        """
        session = self.analyze(transactions, overrides)
        journal = session.journal()
        if not journal:
            raise SessionStateError("내보낼 분개가 없습니다. 거래를 먼저 분류하세요.")
        return rows_to_csv(journal_rows(journal))

    # =====================================================================
    # 원장
    # =====================================================================

    def ledger_from_lines(self, lines: Sequence[JournalLine]) -> LedgerReport:
        """분개장 → 원장

        Raises:
            SessionStateError: 분개가 비어 있는 경우
            LedgerGenerationError: 원장 생성 실패
        """
        session = self._new_session()
        session.load_journal(lines)
        return session.generate_ledger()

    def ledger_csv(self, lines: Sequence[JournalLine]) -> str:
        report = self.ledger_from_lines(lines)
        return rows_to_csv(ledger_rows(report.ledger, report.equation))

    def pipeline(
        self,
        transactions: Sequence[Transaction],
        overrides: Iterable[OverrideRequest] = (),
    ) -> dict[str, Any]:
        """거래 → 분류 → 분개 → 원장 전체 실행"""
        session = self.analyze(transactions, overrides)
        report = session.generate_ledger()
        logger.info(
            f"전체 처리 완료: transactions={len(session.transactions)}, "
            f"equation_balanced={report.equation.is_balanced}"
        )
        return {
            "analysis": self.analysis_payload(session),
            "ledger": report.to_dict(),
        }
