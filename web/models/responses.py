"""
응답 스키마 (Pydantic)

Web API 응답 데이터 직렬화.
금액은 정밀도 보존을 위해 문자열(Decimal)로 전달.
"""

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """헬스 체크 응답"""

    status: str = Field(default="ok", description="서비스 상태")
    version: str = Field(..., description="API 버전")
    counter_account: str = Field(..., description="분개 상대 계정")


class RulesResponse(BaseModel):
    """차변/대변 규칙 및 배지 스타일"""

    debit_rules: list[str] = Field(..., description="차변 발생 조건")
    credit_rules: list[str] = Field(..., description="대변 발생 조건")
    account_types: list[str] = Field(..., description="계정 유형 목록")
    badges: dict[str, str] = Field(..., description="유형별 배지 스타일")
    neutral_badge: str = Field(..., description="알 수 없는 유형 배지 스타일")


class BalanceCheckResponse(BaseModel):
    """분개장 차대 균형"""

    is_balanced: bool
    total_debits: str
    total_credits: str
    difference: str


class AnalyzeResponse(BaseModel):
    """거래 분석 응답

    분류된 거래, 통계, 분개장, 차대 균형.
    """

    transactions: list[dict[str, Any]] = Field(default_factory=list, description="분류된 거래")
    stats: dict[str, int] = Field(default_factory=dict, description="분류 통계")
    journal: list[dict[str, Any]] = Field(default_factory=list, description="분개 항목")
    balance: BalanceCheckResponse = Field(..., description="차대 균형")


class EquationResponse(BaseModel):
    """회계 등식 검증"""

    is_balanced: bool
    assets: str
    liabilities: str
    equity: str
    difference: str
    totals: dict[str, str] = Field(default_factory=dict)


class LedgerResponse(BaseModel):
    """총계정원장 응답"""

    accounts: list[dict[str, Any]] = Field(default_factory=list, description="계정별 원장")
    chart_of_accounts: dict[str, dict[str, str]] = Field(default_factory=dict, description="계정과목표")
    equation: EquationResponse = Field(..., description="회계 등식 검증")
    journal_balance: BalanceCheckResponse = Field(..., description="분개장 차대 균형")
    account_count: int = Field(..., description="계정 수")
    line_count: int = Field(..., description="게시된 분개 항목 수")


class PipelineResponse(BaseModel):
    """거래 → 분개 → 원장 전체 결과"""

    analysis: AnalyzeResponse
    ledger: LedgerResponse
