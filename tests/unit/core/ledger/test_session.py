"""장부 세션 테스트"""

from decimal import Decimal
from typing import Any

import pytest

from core.config.loader import BookkeepingConfig
from core.ledger import session as session_module
from core.ledger.entry_builder import JournalLine
from core.ledger.session import (
    BookkeepingSession,
    LedgerGenerationError,
    SessionStateError,
)
from core.ledger.types import AccountType, JournalSide


@pytest.fixture
def session(sample_records: list[dict[str, Any]]) -> BookkeepingSession:
    s = BookkeepingSession()
    s.load_records(sample_records)
    s.analyze()
    return s


class TestLoadAndAnalyze:
    """적재 / 분류 테스트"""

    def test_from_config(self) -> None:
        config = BookkeepingConfig(counter_account="Bank Account", tolerance=Decimal("0.5"))

        s = BookkeepingSession.from_config(config)

        assert s.counter_account == "Bank Account"
        assert s.tolerance == Decimal("0.5")

    def test_analyze_without_data(self) -> None:
        """적재 전 분류는 예외"""
        with pytest.raises(SessionStateError):
            BookkeepingSession().analyze()

    def test_analyze(self, sample_records: list[dict[str, Any]]) -> None:
        s = BookkeepingSession()
        assert s.load_records(sample_records) == 5

        stats = s.analyze()

        assert stats.total == 5
        assert stats.uncategorized == 0
        assert len(s.transactions) == 5

    def test_load_discards_derived_state(self, session: BookkeepingSession) -> None:
        """새 거래 적재 시 이전 분류/원장 폐기"""
        session.generate_ledger()

        session.load_records([{"Account": "Cash", "Amount": "1"}])

        assert session.transactions == []
        assert session.report is None


class TestOperatorEdits:
    """운영자 수정 테스트"""

    def test_recategorize(self, session: BookkeepingSession) -> None:
        item = session.recategorize(1, "Asset")

        assert item.account_type is AccountType.ASSET
        assert item.side is JournalSide.CREDIT
        assert session.stats.asset == 2
        assert session.stats.expense == 0

    def test_recategorize_out_of_range(self, session: BookkeepingSession) -> None:
        with pytest.raises(SessionStateError, match="index=99"):
            session.recategorize(99, "Asset")

    def test_recategorize_unknown_type(self, session: BookkeepingSession) -> None:
        with pytest.raises(ValueError):
            session.recategorize(0, "Income")

    def test_uncategorized_excluded_from_journal(self, session: BookkeepingSession) -> None:
        session.recategorize(0, None)

        assert session.stats.uncategorized == 1
        assert len(session.journal()) == 8

    def test_set_note(self, session: BookkeepingSession) -> None:
        session.set_note(1, "January rent")

        assert session.journal()[2].description == "January rent"

    def test_edit_invalidates_report(self, session: BookkeepingSession) -> None:
        session.generate_ledger()
        assert session.report is not None

        session.set_note(0, "edited")

        assert session.report is None

    def test_reset(self, session: BookkeepingSession) -> None:
        """reset 후 원본에서 다시 분류"""
        session.recategorize(0, None)
        session.set_note(1, "edited")

        session.reset()

        assert session.stats.uncategorized == 0
        assert session.transactions[1].journal_note == "Payment for office rent"


class TestJournalAndLedger:
    """분개장 / 원장 테스트"""

    def test_journal_balanced(self, session: BookkeepingSession) -> None:
        result = session.check_balance()

        assert result.is_balanced
        assert result.total_debits == Decimal("14000.00")

    def test_generate_ledger(self, session: BookkeepingSession) -> None:
        report = session.generate_ledger()

        assert report.equation.is_balanced
        assert report.journal_balance.is_balanced
        assert len(report.ledger) == 6
        assert session.report is report

    def test_report_to_dict(self, session: BookkeepingSession) -> None:
        data = session.generate_ledger().to_dict()

        assert data["account_count"] == 6
        assert data["line_count"] == 10
        assert [a["name"] for a in data["accounts"]][0] == "Cash"
        assert data["equation"]["assets"] == "13700.00"

    def test_generate_without_journal(self) -> None:
        """게시할 분개가 없으면 예외"""
        with pytest.raises(SessionStateError):
            BookkeepingSession().generate_ledger()

    def test_imported_journal(self, balanced_journal: list[JournalLine]) -> None:
        """재입력 분개장으로 원장 생성"""
        s = BookkeepingSession()
        s.load_journal(balanced_journal)

        report = s.generate_ledger()

        assert report.equation.assets == Decimal("1000")
        assert s.journal() == balanced_journal

    def test_counter_account_from_session(self, sample_records: list[dict[str, Any]]) -> None:
        s = BookkeepingSession(counter_account="Bank Account")
        s.load_records(sample_records)
        s.analyze()

        report = s.generate_ledger()

        assert "Bank Account" in report.ledger
        assert "Cash" not in report.ledger
        assert report.equation.is_balanced

    def test_generation_failure_wrapped(
        self, session: BookkeepingSession, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """원장 생성 실패는 LedgerGenerationError 하나로 보고, 이전 결과 유지"""
        previous = session.generate_ledger()

        def broken(*args: Any, **kwargs: Any) -> None:
            raise RuntimeError("boom")

        monkeypatch.setattr(session_module, "check_equation", broken)

        with pytest.raises(LedgerGenerationError, match="boom"):
            session.generate_ledger()

        assert session.report is previous
