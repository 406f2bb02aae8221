"""Locate the real header inside an export and tokenize the rows below it.

Both ledger exports may start with a variable-length preamble (party name,
period, generation timestamp) before the column header. The header row is
found by its leading text (the schema's *header signature*); when no line
carries it, the whole blob is treated as data with the header on the first
line.

Tokenization uses the stdlib :mod:`csv` module with ``;`` as delimiter, so
quoted cells may contain semicolons, doubled quotes and embedded newlines.
"""

from __future__ import annotations

import csv
import io
from collections.abc import Iterator, Mapping, Sequence

from ..errors import ExportKind, ParseFailure
from ..logging_setup import get_logger
from .schemas import ExportSchema

DELIMITER = ";"

logger = get_logger("campaign_finance.ingest.reader")


def coerce_text(blob: object, source: ExportKind) -> str:
    """Return ``blob`` as text, decoding UTF-8 bytes.

    Raises :class:`ParseFailure` for undecodable bytes and non-text values.
    """

    if isinstance(blob, str):
        text = blob
    elif isinstance(blob, bytes | bytearray):
        try:
            text = bytes(blob).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ParseFailure(source, f"not valid UTF-8 text ({exc.reason})") from exc
    else:
        raise ParseFailure(source, f"expected text, got {type(blob).__name__}")
    return text.removeprefix("\ufeff")


def slice_from_header(text: str, signature: str) -> str:
    """Return ``text`` starting at the first line that begins with ``signature``.

    Original line endings are kept so quoted newlines stay intact. Without a
    matching line the text is returned as-is.
    """

    lines = text.splitlines(keepends=True)
    for idx, line in enumerate(lines):
        # Some exporters quote every header cell.
        if line.lstrip().lstrip('"').startswith(signature):
            logger.debug("header %r found on line %d", signature, idx + 1)
            return "".join(lines[idx:])
    logger.debug("header %r not found; treating first line as header", signature)
    return text


class Row:
    """A tokenized data row addressed by header name."""

    __slots__ = ("_cells", "_index")

    def __init__(self, cells: Sequence[str], index: Mapping[str, int]) -> None:
        self._cells = cells
        self._index = index

    def get(self, *names: str, default: str = "") -> str:
        """Return the stripped cell of the first of ``names`` in the header.

        Later names are alternate spellings and only consulted when earlier
        ones are absent from the header. A missing cell (short row) yields
        ``default``.
        """

        for name in names:
            pos = self._index.get(name)
            if pos is None:
                continue
            # The spelling is fixed per header; a short row never falls through
            # to the alternates.
            if pos >= len(self._cells):
                return default
            return self._cells[pos].strip()
        return default


def _header_index(header: Sequence[str]) -> dict[str, int]:
    index: dict[str, int] = {}
    for pos, name in enumerate(header):
        # Keep the first occurrence when a header name repeats.
        index.setdefault(name.strip().strip('"').strip(), pos)
    return index


def _required_positions(index: Mapping[str, int], schema: ExportSchema) -> list[int]:
    positions: list[int] = []
    if schema.date_column in index:
        positions.append(index[schema.date_column])
    for name in schema.value_columns:
        if name in index:
            positions.append(index[name])
            break
    return positions


def read_rows(blob: object, schema: ExportSchema) -> Iterator[Row]:
    """Yield data rows of ``blob`` for ``schema``.

    Blank lines and rows too short to reach the schema's date/value columns are
    skipped. Raises :class:`ParseFailure` when ``blob`` is not text or the
    tokenizer cannot determine field boundaries.
    """

    text = coerce_text(blob, schema.kind)
    data = slice_from_header(text, schema.header_signature)
    reader = csv.reader(io.StringIO(data, newline=""), delimiter=DELIMITER, quotechar='"')

    try:
        header = next(reader, None)
        if header is None:
            logger.debug("%s export is empty", schema.kind)
            return
        index = _header_index(header)
        min_len = max(_required_positions(index, schema), default=-1) + 1

        read = skipped = 0
        for cells in reader:
            if not cells or all(not c.strip() for c in cells):
                continue
            read += 1
            if len(cells) < min_len:
                skipped += 1
                continue
            yield Row(cells, index)
    except csv.Error as exc:
        raise ParseFailure(
            schema.kind, f"could not tokenize line {reader.line_num}: {exc}"
        ) from exc

    logger.debug("%s export: %d data rows, %d too short", schema.kind, read, skipped)


__all__ = ["DELIMITER", "Row", "coerce_text", "read_rows", "slice_from_header"]
