"""
총계정원장 API

POST /api/ledger                   - 분개장 → 원장 + 회계 등식 검증
POST /api/ledger/export            - 원장 CSV 다운로드
POST /api/ledger/from-transactions - 원본 거래 → 분개 → 원장 전체 실행
"""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from core.ledger.entry_builder import JournalLine
from core.ledger.exports import ledger_filename
from core.ledger.session import LedgerGenerationError, SessionStateError
from core.ledger.transactions import Transaction
from web.dependencies import get_bookkeeping_service
from web.models.requests import AnalyzeRequest, LedgerRequest
from web.models.responses import LedgerResponse, PipelineResponse
from web.services.bookkeeping_service import BookkeepingService

router = APIRouter(prefix="/api/ledger", tags=["Ledger"])


def _lines(request: LedgerRequest) -> list[JournalLine]:
    return [JournalLine.from_record(line.to_record()) for line in request.lines]


@router.post("", response_model=LedgerResponse)
async def generate_ledger(
    request: LedgerRequest,
    service: BookkeepingService = Depends(get_bookkeeping_service),
) -> LedgerResponse:
    """분개장을 원장에 게시하고 회계 등식 검증"""
    try:
        report = service.ledger_from_lines(_lines(request))
    except SessionStateError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except LedgerGenerationError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return LedgerResponse(**report.to_dict())


@router.post("/export")
async def export_ledger(
    request: LedgerRequest,
    service: BookkeepingService = Depends(get_bookkeeping_service),
) -> Response:
    """원장 CSV 다운로드 (회계 등식 검증 블록 포함)"""
    try:
        content = service.ledger_csv(_lines(request))
    except SessionStateError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except LedgerGenerationError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{ledger_filename()}"'},
    )


@router.post("/from-transactions", response_model=PipelineResponse)
async def ledger_from_transactions(
    request: AnalyzeRequest,
    service: BookkeepingService = Depends(get_bookkeeping_service),
) -> PipelineResponse:
    """원본 거래 → 분류 → 분개 → 원장"""
    transactions = [Transaction.from_record(r.to_record()) for r in request.transactions]
    try:
        result = service.pipeline(transactions, request.overrides)
    except (SessionStateError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except LedgerGenerationError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return PipelineResponse(**result)
