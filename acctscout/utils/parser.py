# acctscout/utils/parser.py
import csv
import io
import zipfile
from pathlib import Path
from typing import Iterable, List

from openpyxl import load_workbook


class CandidateFileError(ValueError):
    """Input file could not be read or parsed."""

    def __init__(self, path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


def parse_csv_bytes(content: bytes) -> List[List[str]]:
    # strict: a dropped byte could turn an invalid identifier into a valid one
    text = content.decode("utf-8")
    reader = csv.reader(io.StringIO(text))
    rows = [row for row in reader if row]
    return rows


def parse_xlsx_bytes(content: bytes) -> List[List[str]]:
    workbook = load_workbook(io.BytesIO(content), read_only=True)
    try:
        sheet = workbook.active

        rows = []
        for row in sheet.iter_rows(values_only=True):
            if not row:
                continue
            cleaned = [str(cell) for cell in row if cell is not None and str(cell) != ""]
            if cleaned:
                rows.append(cleaned)
    finally:
        workbook.close()

    return rows


def parse_text_bytes(content: bytes) -> List[List[str]]:
    text = content.decode("utf-8")
    # only \n, \r\n and \r end a line; str.splitlines also splits on \x1c, \x85 etc.
    lines = (line.rstrip("\n") for line in io.StringIO(text, newline=None))
    return [[line] for line in lines if line.strip()]


def extract_candidates(rows: Iterable[List[str]]) -> List[str]:
    # first non-blank cell per row, passed on as-is: whitespace makes it invalid
    candidates = []
    for row in rows:
        c = next((v for v in row if v and v.strip()), None)
        if c is not None:
            candidates.append(c)
    return candidates


def load_candidates(path) -> List[str]:
    path = Path(path)
    try:
        content = path.read_bytes()
    except OSError as e:
        raise CandidateFileError(path, e.strerror or str(e)) from e

    suffix = path.suffix.lower()
    try:
        if suffix == ".csv":
            rows = parse_csv_bytes(content)
        elif suffix == ".xlsx":
            rows = parse_xlsx_bytes(content)
        else:
            rows = parse_text_bytes(content)
    except UnicodeDecodeError as e:
        raise CandidateFileError(path, "not valid utf-8") from e
    except csv.Error as e:
        raise CandidateFileError(path, f"bad csv: {e}") from e
    except (zipfile.BadZipFile, KeyError, ValueError) as e:
        raise CandidateFileError(path, f"bad xlsx: {e}") from e

    return extract_candidates(rows)
