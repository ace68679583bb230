"""
어댑터 테스트 픽스처

공통 테스트 설정 및 픽스처 제공.
"""

import pytest


@pytest.fixture
def journal_csv_text() -> str:
    """이전에 내보낸 분개장 CSV"""
    return (
        "Date,Account,Debit,Credit,Description,Category\n"
        "2024-01-05,Rent Expense,,500.00,Payment for office rent,Expense\n"
        "2024-01-05,Cash,500.00,,Payment for office rent,Asset\n"
    )
