"""
거래 분류 / 분개장 API

POST /api/journal/analyze - 거래 분류 + 분개장 + 차대 균형
POST /api/journal/export  - 분개장 CSV 다운로드
"""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from core.ledger.exports import journal_filename
from core.ledger.session import SessionStateError
from core.ledger.transactions import Transaction
from web.dependencies import get_bookkeeping_service
from web.models.requests import AnalyzeRequest
from web.models.responses import AnalyzeResponse
from web.services.bookkeeping_service import BookkeepingService

router = APIRouter(prefix="/api/journal", tags=["Journal"])


def _transactions(request: AnalyzeRequest) -> list[Transaction]:
    return [Transaction.from_record(r.to_record()) for r in request.transactions]


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze_transactions(
    request: AnalyzeRequest,
    service: BookkeepingService = Depends(get_bookkeeping_service),
) -> AnalyzeResponse:
    """거래 분류 후 분개장 생성

    overrides로 운영자 분류/메모 수정을 함께 적용.
    """
    try:
        session = service.analyze(_transactions(request), request.overrides)
    except (SessionStateError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))

    return AnalyzeResponse(**service.analysis_payload(session))


@router.post("/export")
async def export_journal(
    request: AnalyzeRequest,
    service: BookkeepingService = Depends(get_bookkeeping_service),
) -> Response:
    """분개장 CSV 다운로드"""
    try:
        content = service.journal_csv(_transactions(request), request.overrides)
    except (SessionStateError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))

    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{journal_filename()}"'},
    )
