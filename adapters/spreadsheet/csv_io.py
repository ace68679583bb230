"""
CSV 입출력 어댑터

스프레드시트에서 내보낸 거래/분개장 CSV를 읽고,
분개장/총계정원장 행 목록을 CSV로 기록.

모든 셀은 문자열로 읽음 (금액 파싱은 엔진이 담당).
"""

import io
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import IO, Any

import pandas as pd

from core.constants import ExportColumns
from core.ledger.entry_builder import JournalLine
from core.ledger.transactions import Transaction

logger = logging.getLogger(__name__)

CsvSource = str | Path | IO[str]

REQUIRED_TRANSACTION_COLUMNS = (ExportColumns.ACCOUNT, ExportColumns.AMOUNT)
REQUIRED_JOURNAL_COLUMNS = (ExportColumns.ACCOUNT, ExportColumns.DEBIT, ExportColumns.CREDIT)


class CsvFormatError(Exception):
    """CSV를 읽을 수 없거나 필수 컬럼이 없는 경우"""

    pass


def _read_frame(source: CsvSource, required: Sequence[str]) -> pd.DataFrame:
    """CSV → DataFrame (문자열 셀, 빈 줄 제거)"""
    try:
        df = pd.read_csv(
            source,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            skipinitialspace=True,
        )
    except pd.errors.EmptyDataError as e:
        raise CsvFormatError("CSV 파일이 비어 있습니다") from e
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise CsvFormatError(f"CSV 파싱 실패: {e}") from e

    df.columns = [str(c).strip() for c in df.columns]

    missing = [c for c in required if c not in df.columns]
    if missing:
        raise CsvFormatError(f"필수 컬럼 누락: {missing} (컬럼: {list(df.columns)})")

    if df.empty:
        return df

    # 구분자만 있는 빈 행 제거 (",,,,")
    non_empty = df.apply(lambda row: any(str(v).strip() for v in row), axis=1)
    return df[non_empty]


def _records(df: pd.DataFrame) -> list[dict[str, Any]]:
    return df.to_dict(orient="records")


def read_transactions(source: CsvSource) -> list[Transaction]:
    """거래 CSV 읽기

    Raises:
        CsvFormatError: 파싱 실패 또는 Account/Amount 컬럼 누락
    """
    df = _read_frame(source, REQUIRED_TRANSACTION_COLUMNS)
    transactions = [Transaction.from_record(r) for r in _records(df)]
    logger.info(f"거래 CSV 읽기 완료: {len(transactions)}건")
    return transactions


def read_journal(source: CsvSource) -> list[JournalLine]:
    """분개장 CSV 읽기 (이전에 내보낸 분개장 재입력)

    Raises:
        CsvFormatError: 파싱 실패 또는 Account/Debit/Credit 컬럼 누락
    """
    df = _read_frame(source, REQUIRED_JOURNAL_COLUMNS)
    lines = [JournalLine.from_record(r) for r in _records(df)]
    logger.info(f"분개장 CSV 읽기 완료: {len(lines)}건")
    return lines


def read_transactions_text(text: str) -> list[Transaction]:
    return read_transactions(io.StringIO(text))


def read_journal_text(text: str) -> list[JournalLine]:
    return read_journal(io.StringIO(text))


def _block_to_csv(block: list[list[str]]) -> str:
    return pd.DataFrame(block, dtype=str).to_csv(index=False, header=False, lineterminator="\n")


def rows_to_csv(rows: Sequence[Sequence[str]]) -> str:
    """행 목록(첫 행 = 헤더) → CSV 문자열

    헤더와 폭이 다른 행(빈 행, 검증 블록)은 채우지 않고 그대로 기록.
    빈 행은 빈 줄.
    """
    if not rows:
        return ""
    width = len(rows[0])

    chunks: list[str] = []
    block: list[list[str]] = []
    for row in rows:
        if len(row) == width:
            block.append(list(row))
            continue
        if block:
            chunks.append(_block_to_csv(block))
            block = []
        chunks.append(_block_to_csv([list(row)]) if row else "\n")
    if block:
        chunks.append(_block_to_csv(block))

    return "".join(chunks)


def write_csv(rows: Sequence[Sequence[str]], path: Path) -> Path:
    """행 목록을 CSV 파일로 기록 (상위 디렉토리 자동 생성)"""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(rows_to_csv(rows), encoding="utf-8")
    logger.info(f"CSV 기록 완료: {path} ({max(len(rows) - 1, 0)}행)")
    return path

