"""Exceptions raised by ``campaign_finance``.

Parsing is tolerant by default; the only condition surfaced to callers is an
input that cannot be read as delimited text at all.
"""

from __future__ import annotations

import csv
from typing import Literal

type ExportKind = Literal["income", "expense"]


class ParseFailure(csv.Error):
    """An export could not be tokenized as delimited text.

    Subclasses ``csv.Error`` so callers that already surface ``csv.Error`` as a
    parse failure keep working. ``source`` names which of the two exports
    failed.
    """

    def __init__(self, source: ExportKind, reason: str) -> None:
        super().__init__(f"{source} export: {reason}")
        self.source = source
        self.reason = reason


__all__ = ["ExportKind", "ParseFailure"]
