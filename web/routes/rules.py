"""
차변/대변 규칙 API

GET /api/rules - 규칙 설명 및 유형별 배지 스타일
"""

from fastapi import APIRouter

from core.ledger.exports import category_badge
from core.ledger.rules import rules_explanation
from core.ledger.types import NEUTRAL_BADGE, AccountType
from web.models.responses import RulesResponse

router = APIRouter(prefix="/api", tags=["Rules"])


@router.get("/rules", response_model=RulesResponse)
async def get_rules() -> RulesResponse:
    """차변/대변 규칙 설명"""
    explanation = rules_explanation()
    return RulesResponse(
        debit_rules=explanation["debit_rules"],
        credit_rules=explanation["credit_rules"],
        account_types=[t.value for t in AccountType],
        badges={t.value: category_badge(t) for t in AccountType},
        neutral_badge=NEUTRAL_BADGE,
    )
