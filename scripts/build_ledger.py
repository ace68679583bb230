"""
거래 CSV → 분개장 / 총계정원장 CSV 일괄 생성

사용법:
    python -m scripts.build_ledger data/transactions.csv
    python -m scripts.build_ledger data/transactions.csv --output-dir data/exports --strict
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from datetime import date
from pathlib import Path

# 프로젝트 루트를 Python 경로에 추가
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from adapters.spreadsheet.csv_io import CsvFormatError, read_transactions, write_csv
from core.config.loader import ConfigLoadError, load_settings
from core.constants import Paths
from core.ledger.exports import journal_filename, journal_rows, ledger_filename, ledger_rows
from core.ledger.session import (
    BookkeepingSession,
    LedgerGenerationError,
    LedgerReport,
    SessionStateError,
)
from core.ledger.transactions import CategorizationStats
from core.logging import setup_logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildResult:
    """일괄 생성 결과"""

    stats: CategorizationStats
    report: LedgerReport
    journal_path: Path
    ledger_path: Path


def build(
    input_path: Path,
    output_dir: Path,
    session: BookkeepingSession,
    today: date | None = None,
) -> BuildResult:
    """거래 CSV를 읽어 분개장/원장 CSV 기록

    Raises:
        CsvFormatError: 입력 CSV 형식 오류
        SessionStateError: 거래 또는 분개가 없는 경우
        LedgerGenerationError: 원장 생성 실패
    """
    transactions = read_transactions(input_path)
    session.load_transactions(transactions)
    stats = session.analyze()

    journal = session.journal()
    report = session.generate_ledger()

    journal_path = write_csv(journal_rows(journal), output_dir / journal_filename(today))
    ledger_path = write_csv(
        ledger_rows(report.ledger, report.equation),
        output_dir / ledger_filename(today),
    )

    return BuildResult(
        stats=stats,
        report=report,
        journal_path=journal_path,
        ledger_path=ledger_path,
    )


def print_summary(result: BuildResult) -> None:
    stats = result.stats
    balance = result.report.journal_balance
    equation = result.report.equation

    print("=" * 60)
    print("=== 분개장 / 총계정원장 생성 결과 ===")
    print("=" * 60)

    print(f"\n[1] 거래 분류: 총 {stats.total}건")
    for name, count in stats.to_dict().items():
        if name != "total":
            print(f"  {name:14} {count:>6}")

    print("\n[2] 분개장 차대 균형:")
    print(f"  차변 합계: {balance.total_debits}")
    print(f"  대변 합계: {balance.total_credits}")
    print(f"  상태: {'BALANCED' if balance.is_balanced else 'NOT BALANCED'}")

    print("\n[3] 회계 등식 (Assets = Liabilities + Equity):")
    print(f"  Assets:      {equation.assets}")
    print(f"  Liabilities: {equation.liabilities}")
    print(f"  Equity:      {equation.equity}")
    print(f"  상태: {'BALANCED' if equation.is_balanced else 'NOT BALANCED'}")

    print("\n[4] 출력 파일:")
    print(f"  {result.journal_path}")
    print(f"  {result.ledger_path}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="거래 CSV에서 분개장 / 총계정원장 CSV 생성"
    )
    parser.add_argument("input", type=Path, help="거래 CSV 경로")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Paths.EXPORT_DIR,
        help=f"출력 디렉토리 (기본: {Paths.EXPORT_DIR})",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="settings.yaml 경로 (기본: config/settings.yaml)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="회계 등식이 맞지 않으면 종료 코드 1 반환",
    )
    parser.add_argument(
        "--no-log-file",
        action="store_true",
        help="로그 파일 없이 콘솔에만 기록",
    )
    args = parser.parse_args(argv)

    try:
        config = load_settings(args.config)
    except ConfigLoadError as e:
        print(f"설정 로드 실패: {e}", file=sys.stderr)
        return 2

    setup_logging("script", level=config.log_level, log_to_file=not args.no_log_file)

    session = BookkeepingSession.from_config(config)
    try:
        result = build(args.input, args.output_dir, session)
    except FileNotFoundError:
        logger.error(f"입력 파일을 찾을 수 없습니다: {args.input}")
        return 2
    except (CsvFormatError, SessionStateError, LedgerGenerationError) as e:
        logger.error(f"생성 실패: {e}")
        return 2

    print_summary(result)

    if args.strict and not result.report.equation.is_balanced:
        logger.error("회계 등식 불일치 (--strict)")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
