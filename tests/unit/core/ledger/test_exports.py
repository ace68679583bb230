"""내보내기 행 생성 테스트"""

from datetime import date
from decimal import Decimal

import pytest

from core.constants import ExportColumns
from core.ledger.entry_builder import JournalLine
from core.ledger.exports import (
    category_badge,
    format_money,
    journal_filename,
    journal_rows,
    ledger_filename,
    ledger_rows,
)
from core.ledger.general_ledger import post_journal
from core.ledger.types import CATEGORY_BADGES, NEUTRAL_BADGE, AccountType
from core.ledger.validation import check_equation


class TestFormatMoney:
    """format_money 테스트"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (Decimal("500"), "500.00"),
            (Decimal("1200.5"), "1200.50"),
            (Decimal("0.005"), "0.01"),
            (Decimal("-12.345"), "-12.35"),
            (None, ""),
        ],
    )
    def test_format(self, value: Decimal | None, expected: str) -> None:
        assert format_money(value) == expected


class TestCategoryBadge:
    """category_badge 테스트"""

    def test_known_types(self) -> None:
        for account_type in AccountType:
            assert category_badge(account_type) == CATEGORY_BADGES[account_type]
            assert category_badge(account_type.value) == CATEGORY_BADGES[account_type]

    def test_unknown_is_neutral(self) -> None:
        """5개 유형 외에는 중립 스타일"""
        assert category_badge("Income") == NEUTRAL_BADGE
        assert category_badge("") == NEUTRAL_BADGE
        assert category_badge(None) == NEUTRAL_BADGE

    @pytest.mark.parametrize("category", ["asset", "ASSET", "Asset ", "revenue", "EXPENSE"])
    def test_exact_value_only(self, category: str) -> None:
        """대소문자/공백이 다른 표기는 중립 스타일"""
        assert category_badge(category) == NEUTRAL_BADGE


class TestJournalRows:
    """journal_rows 테스트"""

    def test_rows(self, balanced_journal: list[JournalLine]) -> None:
        rows = journal_rows(balanced_journal)

        assert rows[0] == list(ExportColumns.JOURNAL)
        assert rows[1] == ["2024-02-01", "Cash", "1000.00", "", "Opening", "Asset"]
        assert rows[2] == ["2024-02-01", "Loans Payable", "", "400.00", "Opening", "Liability"]
        assert len(rows) == 4

    def test_empty_journal_header_only(self) -> None:
        assert journal_rows([]) == [list(ExportColumns.JOURNAL)]


class TestLedgerRows:
    """ledger_rows 테스트"""

    def test_rows_with_validation_block(self, balanced_journal: list[JournalLine]) -> None:
        ledger = post_journal(balanced_journal)
        rows = ledger_rows(ledger, check_equation(ledger))

        assert rows[0] == list(ExportColumns.LEDGER)
        assert rows[1] == ["Cash", "Asset", "1000.00", "0.00", "1000.00", "1"]
        assert rows[3] == ["Common Stock", "Equity", "0.00", "600.00", "600.00", "1"]
        assert rows[4:] == [
            [],
            [ExportColumns.EQUATION_MARKER],
            ["Assets", "$1000.00"],
            ["Liabilities", "$400.00"],
            ["Equity", "$600.00"],
            ["Status", "BALANCED"],
        ]

    def test_not_balanced_status(self) -> None:
        ledger = post_journal([
            JournalLine(
                date="2024-01-01",
                account="Cash",
                debit=Decimal("50"),
                credit=None,
                description="",
                category="Asset",
            )
        ])

        rows = ledger_rows(ledger, check_equation(ledger))

        assert rows[-1] == ["Status", "NOT BALANCED"]


class TestFilenames:
    """내보내기 파일명 테스트"""

    def test_journal_filename(self) -> None:
        assert journal_filename(date(2024, 3, 9)) == "journal_entries_2024-03-09.csv"

    def test_ledger_filename(self) -> None:
        assert ledger_filename(date(2024, 3, 9)) == "general_ledger_2024-03-09.csv"

    def test_default_today(self) -> None:
        assert journal_filename() == f"journal_entries_{date.today().isoformat()}.csv"
