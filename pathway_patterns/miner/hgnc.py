"""
HGNC gene symbol lookup.

The table maps HGNC numeric identifiers to approved gene symbols. It can be
filled from a mapping, or from the tab separated download of
https://www.genenames.org (custom downloads include the ``HGNC ID`` and
``Approved symbol`` columns used here).
"""

import csv
import logging
from functools import lru_cache
from pathlib import Path
from typing import Mapping

from ..config import get_settings

logger = logging.getLogger(__name__)

ID_COLUMN = "HGNC ID"
SYMBOL_COLUMN = "Approved symbol"


class HGNC:
    """
    Approved symbols indexed by HGNC id, and the reverse.

    Lookups accept "HGNC:1100", "1100" or an approved symbol.

    Example:
        >>> hgnc = HGNC({"HGNC:11998": "TP53"})
        >>> hgnc.get_symbol("11998")
        'TP53'
    """

    def __init__(self, symbols: Mapping[str, str] | None = None):
        self._symbols: dict[str, str] = {}
        self._ids: dict[str, str] = {}
        for hgnc_id, symbol in (symbols or {}).items():
            self.add(hgnc_id, symbol)

    @staticmethod
    def normalize(hgnc_id: str) -> str:
        """Numeric part of an HGNC identifier: "HGNC:1100" and "hgnc:1100" become "1100"."""
        text = hgnc_id.strip()
        if text.upper().startswith("HGNC:"):
            text = text[5:]
        return text.strip()

    def add(self, hgnc_id: str, symbol: str) -> None:
        key = self.normalize(hgnc_id)
        self._symbols[key] = symbol
        self._ids[symbol.upper()] = key

    def get_symbol(self, key: str | None) -> str | None:
        """The approved symbol for an id, or the symbol itself if `key` already is one."""
        if not key:
            return None
        symbol = self._symbols.get(self.normalize(key))
        if symbol is not None:
            return symbol
        ident = self._ids.get(key.strip().upper())
        return self._symbols[ident] if ident is not None else None

    def get_id(self, symbol: str) -> str | None:
        ident = self._ids.get(symbol.strip().upper())
        return f"HGNC:{ident}" if ident is not None else None

    def __len__(self) -> int:
        return len(self._symbols)

    def __contains__(self, key: str) -> bool:
        return self.get_symbol(key) is not None

    @classmethod
    def from_file(cls, path: str | Path) -> "HGNC":
        """
        Load an HGNC tab separated download.

        Rows without an id or a symbol are skipped.

        Raises:
            ValueError: The header lacks the "HGNC ID" or "Approved symbol" column
        """
        table = cls()
        with open(path, newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f, delimiter="\t")
            fields = reader.fieldnames or []
            if ID_COLUMN not in fields or SYMBOL_COLUMN not in fields:
                raise ValueError(f"{path}: expected {ID_COLUMN!r} and {SYMBOL_COLUMN!r} columns, got {fields}")
            for row in reader:
                hgnc_id = (row.get(ID_COLUMN) or "").strip()
                symbol = (row.get(SYMBOL_COLUMN) or "").strip()
                if hgnc_id and symbol:
                    table.add(hgnc_id, symbol)
        logger.info("Loaded %d HGNC symbols from %s", len(table), path)
        return table


@lru_cache
def default_hgnc() -> HGNC:
    """The table named by ``settings.hgnc_file``, or an empty one."""
    path = get_settings().hgnc_file
    if path is None:
        logger.warning("No HGNC file configured (PATHWAY_PATTERNS_HGNC_FILE); HGNC ids will not resolve")
        return HGNC()
    return HGNC.from_file(path)
