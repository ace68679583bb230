"""
복식부기 타입 정의

AccountType, JournalSide 등 Ledger 시스템에서 사용하는 Enum과 고정 테이블 정의
"""

from enum import Enum


class AccountType(str, Enum):
    """계정 유형

    복식부기의 5대 계정 유형.
    str을 상속하여 JSON/CSV 직렬화 가능 (값 = 화면/CSV 표기).
    """

    ASSET = "Asset"  # 자산 (현금, 매출채권, 설비)
    LIABILITY = "Liability"  # 부채 (매입채무, 차입금)
    EQUITY = "Equity"  # 자본 (출자금, 이익잉여금)
    REVENUE = "Revenue"  # 수익
    EXPENSE = "Expense"  # 비용

    @classmethod
    def parse(cls, value: "str | AccountType | None") -> "AccountType | None":
        """문자열을 AccountType으로 변환 (알 수 없는 값은 None)"""
        if value is None:
            return None
        if isinstance(value, AccountType):
            return value
        text = str(value).strip()
        for member in cls:
            if text == member.value or text.upper() == member.name:
                return member
        return None


class JournalSide(str, Enum):
    """분개 방향 (차변/대변)"""

    DEBIT = "debit"  # 차변 (자산 증가, 비용 증가)
    CREDIT = "credit"  # 대변 (부채/자본/수익 증가)

    @property
    def opposite(self) -> "JournalSide":
        """반대 방향"""
        return JournalSide.CREDIT if self is JournalSide.DEBIT else JournalSide.DEBIT


# 잔액 = 차변 - 대변 인 계정 유형 (나머지는 대변 - 차변)
DEBIT_NORMAL_TYPES: frozenset[AccountType] = frozenset({AccountType.ASSET, AccountType.EXPENSE})


# 알려진 계정 이름 → 유형 (정확히 일치할 때만 사용)
KNOWN_ACCOUNTS: dict[str, AccountType] = {
    # Assets
    "Lease Deposit": AccountType.ASSET,
    "Inventory": AccountType.ASSET,
    "Prepaid Insurance": AccountType.ASSET,
    "Equipment": AccountType.ASSET,
    "Cash": AccountType.ASSET,
    "Accounts Receivable": AccountType.ASSET,
    "Bank Account": AccountType.ASSET,
    "Fixed Assets": AccountType.ASSET,
    "Investments": AccountType.ASSET,

    # Liabilities
    "Accounts Payable": AccountType.LIABILITY,
    "Loans Payable": AccountType.LIABILITY,
    "Credit Card Payable": AccountType.LIABILITY,
    "Accrued Expenses": AccountType.LIABILITY,
    "Notes Payable": AccountType.LIABILITY,

    # Equity
    "Owner's Equity": AccountType.EQUITY,
    "Retained Earnings": AccountType.EQUITY,
    "Common Stock": AccountType.EQUITY,
    "Preferred Stock": AccountType.EQUITY,

    # Revenue
    "Rental Revenue": AccountType.REVENUE,
    "Tour Revenue": AccountType.REVENUE,
    "Sales Revenue": AccountType.REVENUE,
    "Service Revenue": AccountType.REVENUE,
    "Interest Revenue": AccountType.REVENUE,
    "Commission Revenue": AccountType.REVENUE,

    # Expenses
    "Salary Expense": AccountType.EXPENSE,
    "Rent Expense": AccountType.EXPENSE,
    "Insurance Expense": AccountType.EXPENSE,
    "Marketing Expense": AccountType.EXPENSE,
    "Training Expense": AccountType.EXPENSE,
    "Maintenance Expense": AccountType.EXPENSE,
    "Utilities Expense": AccountType.EXPENSE,
    "Supplies Expense": AccountType.EXPENSE,
    "Depreciation Expense": AccountType.EXPENSE,
    "Travel Expense": AccountType.EXPENSE,
    "Meals Expense": AccountType.EXPENSE,
    "Office Expense": AccountType.EXPENSE,
    "Legal Expense": AccountType.EXPENSE,
    "Advertising Expense": AccountType.EXPENSE,
}


# 부분 일치 키워드 (우선순위 순서, 먼저 일치한 그룹이 결정)
KEYWORD_GROUPS: tuple[tuple[AccountType, tuple[str, ...]], ...] = (
    (AccountType.ASSET, ("receivable", "asset", "equipment", "inventory", "cash", "bank", "prepaid")),
    (AccountType.LIABILITY, ("payable", "loan", "debt", "credit", "accrued")),
    (AccountType.REVENUE, ("revenue", "income", "sales", "fee")),
    (AccountType.EQUITY, ("equity", "capital", "stock", "retained")),
)


# 화면 배지 스타일 (알 수 없는 값은 NEUTRAL_BADGE)
CATEGORY_BADGES: dict[AccountType, str] = {
    AccountType.ASSET: "bg-blue-100 text-blue-800",
    AccountType.EXPENSE: "bg-red-100 text-red-800",
    AccountType.REVENUE: "bg-green-100 text-green-800",
    AccountType.LIABILITY: "bg-yellow-100 text-yellow-800",
    AccountType.EQUITY: "bg-purple-100 text-purple-800",
}
NEUTRAL_BADGE: str = "bg-gray-100 text-gray-800"
