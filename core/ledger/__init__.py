"""
복식부기 (Double-Entry Bookkeeping) 엔진

평면 거래 레코드를 분류하고 차변/대변 분개로 확장한 뒤
총계정원장에 게시하여 회계 등식을 검증.

사용 예시:
```python
from core.ledger import BookkeepingSession

session = BookkeepingSession()
session.load_records(rows)
stats = session.analyze()

# 분개장
journal = session.journal()
balance = session.check_balance()

# 원장 + 회계 등식
report = session.generate_ledger()
report.equation.is_balanced
```
"""

from core.ledger.classifier import classify, match_account
from core.ledger.entry_builder import JournalEntryBuilder, JournalLine, build_journal
from core.ledger.general_ledger import GeneralLedger, LedgerAccount, PostedLine, post_journal
from core.ledger.rules import counter_account_for, rules_explanation, side_for
from core.ledger.session import (
    BookkeepingSession,
    LedgerGenerationError,
    LedgerReport,
    SessionStateError,
)
from core.ledger.transactions import (
    CategorizationStats,
    CategorizedTransaction,
    Transaction,
    categorize,
)
from core.ledger.types import KNOWN_ACCOUNTS, AccountType, JournalSide
from core.ledger.validation import (
    BalanceCheck,
    EquationCheck,
    LedgerTotals,
    check_balance,
    check_equation,
)

__all__ = [
    # 세션
    "BookkeepingSession",
    "LedgerReport",
    "SessionStateError",
    "LedgerGenerationError",
    # 분류 / 규칙
    "classify",
    "match_account",
    "side_for",
    "counter_account_for",
    "rules_explanation",
    "categorize",
    # 분개 / 원장
    "JournalEntryBuilder",
    "JournalLine",
    "build_journal",
    "GeneralLedger",
    "LedgerAccount",
    "PostedLine",
    "post_journal",
    # 검증
    "BalanceCheck",
    "EquationCheck",
    "LedgerTotals",
    "check_balance",
    "check_equation",
    # 모델 / Enum
    "Transaction",
    "CategorizedTransaction",
    "CategorizationStats",
    "AccountType",
    "JournalSide",
    # 상수
    "KNOWN_ACCOUNTS",
]
