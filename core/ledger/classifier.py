"""
계정 분류기

계정 이름 → AccountType 매핑
"""

from core.ledger.types import KEYWORD_GROUPS, KNOWN_ACCOUNTS, AccountType


def match_account(account_name: str | None) -> AccountType | None:
    """테이블/키워드로 계정 유형 탐색 (일치 없으면 None)

    1. 알려진 계정 테이블과 정확히 일치 (앞뒤 공백 제거, 대소문자 구분)
    2. 키워드 부분 일치 (대소문자 무시, Asset → Liability → Revenue → Equity 순)
    """
    if not account_name:
        return None

    clean_name = str(account_name).strip()

    known = KNOWN_ACCOUNTS.get(clean_name)
    if known is not None:
        return known

    lower_name = clean_name.lower()
    for account_type, keywords in KEYWORD_GROUPS:
        if any(keyword in lower_name for keyword in keywords):
            return account_type

    return None


def classify(account_name: str | None) -> AccountType:
    """계정 이름으로 계정 유형 결정

    테이블/키워드 일치가 없으면 (빈 값 포함) Expense.
    미분류 항목은 대부분 운영 비용이므로 기본값으로 사용.

    실패하지 않는 순수 함수.
    """
    return match_account(account_name) or AccountType.EXPENSE
