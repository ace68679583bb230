"""JournalEntryBuilder 테스트"""

from decimal import Decimal

import pytest

from core.ledger.entry_builder import JournalEntryBuilder, JournalLine, build_journal
from core.ledger.transactions import Transaction, categorize, categorize_one
from core.ledger.types import AccountType, JournalSide
from core.ledger.validation import check_balance


def _item(account: str, amount: str, description: str = "Office rent", index: int = 0):
    transaction = Transaction(
        date="2024-01-05",
        account=account,
        amount=Decimal(amount),
        description=description,
        transaction_id="T001",
    )
    return categorize_one(transaction, index)


class TestJournalLine:
    """JournalLine 테스트"""

    def test_debit_line(self) -> None:
        line = JournalLine(
            date="2024-01-05",
            account="Cash",
            debit=Decimal("500"),
            credit=None,
            description="rent",
            category="Asset",
        )

        assert line.side is JournalSide.DEBIT
        assert line.magnitude == Decimal("500")

    def test_empty_line(self) -> None:
        """재입력 분개장의 빈 항목"""
        line = JournalLine(
            date="", account="Cash", debit=None, credit=None, description="", category=""
        )

        assert line.side is None
        assert line.magnitude == Decimal("0")

    def test_from_record(self) -> None:
        """분개장 CSV 레코드에서 생성"""
        line = JournalLine.from_record(
            {
                "Date": "2024-01-05",
                "Account": "Rent Expense",
                "Debit": "",
                "Credit": "500.00",
                "Description": "Payment for office rent",
                "Category": " Expense ",
            }
        )

        assert line.debit is None
        assert line.credit == Decimal("500.00")
        assert line.category == "Expense"
        assert line.transaction_id is None

    def test_to_dict(self) -> None:
        line = JournalLine(
            date="2024-01-05",
            account="Cash",
            debit=Decimal("12.50"),
            credit=None,
            description="x",
            category="Asset",
            transaction_id="T1",
        )

        data = line.to_dict()

        assert data["debit"] == "12.50"
        assert data["credit"] is None
        assert data["transaction_id"] == "T1"


class TestJournalEntryBuilder:
    """JournalEntryBuilder 테스트"""

    def test_expand_rent_payment(self) -> None:
        """임차료 지급: 비용 대변 500 / 현금 차변 500"""
        builder = JournalEntryBuilder()
        subject, counter = builder.expand(_item("Rent Expense", "-500"))

        assert subject.account == "Rent Expense"
        assert subject.credit == Decimal("500")
        assert subject.debit is None
        assert subject.category == "Expense"
        assert subject.description == "Payment for office rent"
        assert subject.transaction_id == "T001"

        assert counter.account == "Cash"
        assert counter.debit == Decimal("500")
        assert counter.credit is None
        assert counter.category == "Asset"
        assert counter.description == subject.description
        assert counter.date == subject.date

    def test_expand_revenue(self) -> None:
        """수익 발생: 수익 대변 / 현금 차변"""
        subject, counter = JournalEntryBuilder().expand(_item("Sales Revenue", "1200"))

        assert subject.side is JournalSide.CREDIT
        assert counter.side is JournalSide.DEBIT
        assert subject.magnitude == counter.magnitude == Decimal("1200")

    def test_custom_counter_account(self) -> None:
        """상대 계정 변경 시 유형도 분류기로 결정"""
        builder = JournalEntryBuilder(counter_account="Bank Account")
        _, counter = builder.expand(_item("Rent Expense", "-500"))

        assert counter.account == "Bank Account"
        assert counter.category == "Asset"

    def test_edited_note_used_as_description(self) -> None:
        item = _item("Rent Expense", "-500")
        item.journal_note = "January rent"

        subject, counter = JournalEntryBuilder().expand(item)

        assert subject.description == counter.description == "January rent"

    def test_blank_note_falls_back_to_description(self) -> None:
        item = _item("Rent Expense", "-500", description="Office rent")
        item.journal_note = ""

        subject, _ = JournalEntryBuilder().expand(item)

        assert subject.description == "Office rent"

    def test_blank_account_uses_type_name(self) -> None:
        """계정 이름이 비어 있으면 유형 이름 사용"""
        subject, _ = JournalEntryBuilder().expand(_item("", "-20"))

        assert subject.account == "Expense"

    def test_expand_uncategorized_raises(self) -> None:
        item = _item("Rent Expense", "-500")
        item.recategorize(None)

        with pytest.raises(ValueError, match="미분류"):
            JournalEntryBuilder().expand(item)

    @pytest.mark.parametrize("account_type", list(AccountType))
    @pytest.mark.parametrize("amount", ["250.75", "-250.75", "0"])
    def test_two_equal_opposite_lines(self, account_type: AccountType, amount: str) -> None:
        """모든 유형/부호에서 같은 금액, 반대 방향 2개 항목"""
        item = _item("Anything", amount)
        item.recategorize(account_type)

        lines = JournalEntryBuilder().expand(item)

        assert len(lines) == 2
        subject, counter = lines
        assert subject.magnitude == counter.magnitude == abs(Decimal(amount))
        assert subject.side is item.side
        assert counter.side is item.side.opposite


class TestBuild:
    """build / build_journal 테스트"""

    def test_build_sample(self, sample_transactions: list[Transaction]) -> None:
        """거래 5건 → 10개 항목, 입력 순서 유지"""
        items, _ = categorize(sample_transactions)
        lines = build_journal(items)

        assert len(lines) == 10
        assert [line.account for line in lines[::2]] == [
            "Owner's Equity",
            "Rent Expense",
            "Service Revenue",
            "Equipment",
            "Loans Payable",
        ]
        assert all(line.account == "Cash" for line in lines[1::2])

    def test_build_skips_uncategorized(self, sample_transactions: list[Transaction]) -> None:
        """미분류 거래는 오류 없이 제외"""
        items, _ = categorize(sample_transactions)
        items[1].recategorize(None)

        lines = JournalEntryBuilder().build(items)

        assert len(lines) == 8
        assert "Rent Expense" not in {line.account for line in lines}

    def test_build_empty(self) -> None:
        assert build_journal([]) == []

    def test_built_journal_always_balanced(self, sample_transactions: list[Transaction]) -> None:
        """유형 조합과 무관하게 차대 균형"""
        items, _ = categorize(sample_transactions)
        for account_type in AccountType:
            for item in items[::2]:
                item.recategorize(account_type)
            result = check_balance(build_journal(items))

            assert result.is_balanced
            assert result.difference == Decimal("0")
