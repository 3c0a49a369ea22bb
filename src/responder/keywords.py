"""Keyword to response lookup table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence, Tuple

KeywordGroup = Tuple[Sequence[str], str]


@dataclass(frozen=True)
class KeywordEntry:
    keyword: str
    response: str


class ResponseTable:
    def __init__(self, entries: Optional[Dict[str, str]] = None) -> None:
        self._table: Dict[str, str] = dict(entries or {})

    @classmethod
    def build(cls, pairs: Iterable[KeywordGroup]) -> "ResponseTable":
        """Insert every keyword of every group; a repeated keyword keeps the last response."""
        table: Dict[str, str] = {}
        for keywords, response in pairs:
            for keyword in keywords:
                table[keyword.strip()] = response
        return cls(table)

    def lookup(self, word: str) -> Optional[str]:
        return self._table.get(word)

    def entries(self) -> Iterable[KeywordEntry]:
        for keyword, response in self._table.items():
            yield KeywordEntry(keyword=keyword, response=response)

    def keywords(self) -> Dict[str, str]:
        return dict(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, word: object) -> bool:
        return word in self._table
