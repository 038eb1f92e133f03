import csv
from pathlib import Path

from spellgen.errors import SpellDataError


def _decoded_lines(f, csv_path, raw):
    for line_num, data in enumerate(f, start=1):
        try:
            line = data.decode("utf-8-sig" if line_num == 1 else "utf-8")
        except UnicodeDecodeError as e:
            raise SpellDataError(f"{csv_path}, line {line_num}: not valid UTF-8 ({e.reason})") from e
        raw.append(line)
        yield line


def has_bare_quote(text: str) -> bool:
    """True if a '"' shows up inside a field that did not start with a quote."""
    in_quotes = False
    field_start = True
    i = 0
    while i < len(text):
        c = text[i]
        if field_start:
            field_start = False
            if c == '"':
                in_quotes = True
                i += 1
                continue
        if in_quotes:
            if c == '"':
                if text[i + 1:i + 2] == '"':
                    i += 1
                else:
                    in_quotes = False
        elif c in ",\r\n":
            field_start = True
        elif c == '"':
            return True
        i += 1
    return False


def iter_rows(csv_path: Path):
    """Yield (row_number, fields) for every non-blank CSV row, numbered from 1."""
    raw = []
    with open(csv_path, "rb") as f:
        reader = csv.reader(_decoded_lines(f, csv_path, raw), strict=True)
        row_number = 0
        try:
            for fields in reader:
                text = "".join(raw)
                raw.clear()
                # blank lines are not records
                if not fields:
                    continue
                if has_bare_quote(text):
                    raise SpellDataError(f'{csv_path}, line {reader.line_num}: bare " in non-quoted field')
                row_number += 1
                yield row_number, fields
        except csv.Error as e:
            raise SpellDataError(f"{csv_path}, line {reader.line_num}: {e}") from e
