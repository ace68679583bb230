"""
스프레드시트 (CSV) 어댑터
"""

from adapters.spreadsheet.csv_io import (
    CsvFormatError,
    read_journal,
    read_journal_text,
    read_transactions,
    read_transactions_text,
    rows_to_csv,
    write_csv,
)

__all__ = [
    "CsvFormatError",
    "read_transactions",
    "read_transactions_text",
    "read_journal",
    "read_journal_text",
    "rows_to_csv",
    "write_csv",
]
