"""Response selection: keyword lookup with a random default fallback."""

from __future__ import annotations

import json
import logging
import random
import threading
from dataclasses import dataclass
from typing import AbstractSet, Optional

from .config import ResponderConfig
from .defaults import DefaultResponsePool
from .keywords import ResponseTable
from .observability import DecisionLogRecord
from .sources import load_default_pool, load_response_table

logger = logging.getLogger(__name__)


@dataclass
class Selection:
    response: str
    record: DecisionLogRecord


class ResponseSelector:
    """
    Answers a set of words with a canned response.

    The first word (in the set's own iteration order) found in the table
    decides the response. Sets are unordered, so when several keywords are
    present any one of them may win. With no match a default response is
    drawn from the pool.

    The rng is only touched under a lock, so one selector can be shared
    between threads.
    """

    def __init__(
        self,
        table: ResponseTable,
        pool: DefaultResponsePool,
        rng: Optional[random.Random] = None,
        decision_log: bool = False,
    ) -> None:
        self._table = table
        self._pool = pool
        self._rng = rng if rng is not None else random.Random()
        self._rng_lock = threading.Lock()
        self._decision_log = decision_log

    @classmethod
    def from_config(
        cls, config: ResponderConfig, rng: Optional[random.Random] = None
    ) -> "ResponseSelector":
        table = load_response_table(config.responses_path, config.source_encoding)
        pool = load_default_pool(config.defaults_path, config.source_encoding)
        if rng is None:
            rng = random.Random(config.random_seed)
        return cls(table, pool, rng=rng, decision_log=config.decision_log)

    @property
    def table(self) -> ResponseTable:
        return self._table

    @property
    def pool(self) -> DefaultResponsePool:
        return self._pool

    def generate_response(self, words: AbstractSet[str]) -> str:
        return self.select(words).response

    def select(self, words: AbstractSet[str]) -> Selection:
        for word in words:
            response = self._table.lookup(word)
            if response is not None:
                record = DecisionLogRecord(
                    word_count=len(words),
                    source="keyword",
                    pool_size=len(self._pool),
                    keyword_hit=word,
                )
                return self._finish(response, record)

        # Nothing recognised, fall back to a default response.
        with self._rng_lock:
            index = self._pool.pick_index(self._rng)
        record = DecisionLogRecord(
            word_count=len(words),
            source="default",
            pool_size=len(self._pool),
            default_index=index,
        )
        return self._finish(self._pool[index], record)

    def _finish(self, response: str, record: DecisionLogRecord) -> Selection:
        if self._decision_log:
            logger.info("decision %s", json.dumps(record.to_dict()))
        return Selection(response=response, record=record)
