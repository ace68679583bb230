"""
Web 모델 패키지

Pydantic 스키마 정의
"""

from web.models.requests import (
    AnalyzeRequest,
    JournalLineRequest,
    LedgerRequest,
    OverrideRequest,
    TransactionRecordRequest,
)
from web.models.responses import (
    AnalyzeResponse,
    BalanceCheckResponse,
    EquationResponse,
    HealthResponse,
    LedgerResponse,
    PipelineResponse,
    RulesResponse,
)

__all__ = [
    # Requests
    "AnalyzeRequest",
    "JournalLineRequest",
    "LedgerRequest",
    "OverrideRequest",
    "TransactionRecordRequest",
    # Responses
    "AnalyzeResponse",
    "BalanceCheckResponse",
    "EquationResponse",
    "HealthResponse",
    "LedgerResponse",
    "PipelineResponse",
    "RulesResponse",
]
