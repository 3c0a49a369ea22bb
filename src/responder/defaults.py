"""Pool of fallback responses used when no keyword matches."""

from __future__ import annotations

import random
from typing import Iterable, List, Tuple

FALLBACK_RESPONSE = "Could you elaborate on that?"


class DefaultResponsePool:
    def __init__(self, responses: Iterable[str]) -> None:
        self._responses: Tuple[str, ...] = tuple(responses)
        if not self._responses:
            raise ValueError("default response pool cannot be empty")

    @classmethod
    def build(cls, entries: Iterable[str]) -> "DefaultResponsePool":
        """Build a pool, seeding it with FALLBACK_RESPONSE when ``entries`` is empty."""
        responses = list(entries)
        if not responses:
            responses.append(FALLBACK_RESPONSE)
        return cls(responses)

    def pick_random(self, rng: random.Random) -> str:
        return self._responses[self.pick_index(rng)]

    def pick_index(self, rng: random.Random) -> int:
        # Uniform over [0, size).
        return rng.randrange(len(self._responses))

    def responses(self) -> List[str]:
        return list(self._responses)

    def __len__(self) -> int:
        return len(self._responses)

    def __getitem__(self, index: int) -> str:
        return self._responses[index]
