"""
요청 스키마 (Pydantic)

Web API 요청 데이터 검증.
필드 alias는 CSV 컬럼명과 동일 (스프레드시트 파서 출력을 그대로 전송 가능).
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TransactionRecordRequest(BaseModel):
    """원본 거래 한 건

    알 수 없는 컬럼은 그대로 보존 (extra="allow").
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    date: str = Field(default="", alias="Date", description="거래 일자")
    account: str = Field(default="", alias="Account", description="계정 이름")
    amount: str | float | int | None = Field(default=None, alias="Amount", description="부호 있는 금액")
    description: str = Field(default="", alias="Description", description="적요")
    vendor_customer: str = Field(default="", alias="Vendor_Customer", description="거래처")
    payment_method: str = Field(default="", alias="Payment_Method", description="결제 수단")
    trans_id: str | None = Field(default=None, alias="Trans_ID", description="거래 ID")

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class OverrideRequest(BaseModel):
    """운영자 수정 (분류 / 분개 메모)

    category에 빈 문자열을 주면 미분류로 되돌림.
    """

    index: int = Field(..., ge=0, description="거래 순번 (0부터)")
    category: str | None = Field(default=None, description="최종 계정 유형")
    journal_note: str | None = Field(default=None, description="분개 메모")


class AnalyzeRequest(BaseModel):
    """거래 분석 요청"""

    transactions: list[TransactionRecordRequest] = Field(..., description="원본 거래 목록")
    overrides: list[OverrideRequest] = Field(default_factory=list, description="운영자 수정 목록")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "transactions": [
                        {
                            "Date": "2024-01-05",
                            "Account": "Rent Expense",
                            "Amount": "-500",
                            "Description": "Office rent",
                            "Vendor_Customer": "Landlord LLC",
                            "Payment_Method": "Bank Transfer",
                            "Trans_ID": "T001",
                        }
                    ],
                    "overrides": [{"index": 0, "journal_note": "January rent"}],
                }
            ]
        }
    }


class JournalLineRequest(BaseModel):
    """분개 항목 (이전에 내보낸 분개장 재입력)"""

    model_config = ConfigDict(populate_by_name=True)

    date: str = Field(default="", alias="Date")
    account: str = Field(..., alias="Account")
    debit: str | float | int | None = Field(default=None, alias="Debit")
    credit: str | float | int | None = Field(default=None, alias="Credit")
    description: str = Field(default="", alias="Description")
    category: str = Field(default="", alias="Category")
    trans_id: str | None = Field(default=None, alias="Trans_ID")

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class LedgerRequest(BaseModel):
    """원장 생성 요청"""

    lines: list[JournalLineRequest] = Field(..., description="분개 항목 목록")
