"""
File Reader - NegocIA
negocia/services/file_reader.py

Turns an uploaded file into the delimited text the relay expects.
Spreadsheets are flattened to CSV from their first sheet.
"""
import io
import logging
from pathlib import Path

import pandas as pd

from negocia.core.exceptions import FileReadException

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = (".csv", ".xlsx", ".xls")
# pandas engine per spreadsheet format
EXCEL_ENGINES = {".xlsx": "openpyxl", ".xls": "xlrd"}


def file_extension(filename: str) -> str:
    return Path(filename or "").suffix.lower()


def is_allowed_file(filename: str) -> bool:
    return file_extension(filename) in ALLOWED_EXTENSIONS


def _decode_text(data: bytes) -> str:
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        # Spreadsheet exports from Windows are often Latin-1
        return data.decode("latin-1")


def _excel_to_csv(filename: str, data: bytes, engine: str) -> str:
    try:
        df = pd.read_excel(
            io.BytesIO(data), sheet_name=0, engine=engine, dtype=str, keep_default_na=False
        )
    except Exception as e:
        raise FileReadException(filename, f"unreadable spreadsheet ({e})") from e
    logger.info(f"Read {len(df)} rows x {len(df.columns)} columns from {filename}")
    return df.to_csv(index=False, lineterminator="\n")


def read_file_text(filename: str, data: bytes) -> str:
    """Read a whole uploaded file as text. Raises FileReadException."""
    ext = file_extension(filename)
    if ext not in ALLOWED_EXTENSIONS:
        raise FileReadException(filename, f"unsupported file type '{ext or 'none'}'")
    if data is None:
        raise FileReadException(filename, "no content")

    if ext in EXCEL_ENGINES:
        return _excel_to_csv(filename, data, EXCEL_ENGINES[ext])
    return _decode_text(data)
