import json
import logging
import random

import pytest

from responder.config import ResponderConfig
from responder.defaults import DefaultResponsePool
from responder.keywords import ResponseTable
from responder.selector import ResponseSelector


class FixedRandom:
    def __init__(self, index: int) -> None:
        self.index = index

    def randrange(self, stop):
        return self.index


@pytest.fixture
def table():
    return ResponseTable.build(
        [
            (["crash", "crashes"], "It never crashes on our system."),
            (["slow"], "Upgrade your processor."),
        ]
    )


@pytest.fixture
def pool():
    return DefaultResponsePool.build(["Tell me more.\n", "Go on.\n"])


def test_keyword_returns_its_response(table, pool):
    selector = ResponseSelector(table, pool, rng=random.Random(0))

    for keyword, response in table.keywords().items():
        assert selector.generate_response({keyword}) == response


def test_unknown_words_fall_back_to_pool(table, pool):
    selector = ResponseSelector(table, pool, rng=FixedRandom(1))

    assert selector.generate_response({"hello", "world"}) == "Go on.\n"


def test_empty_word_set_falls_back(table, pool):
    selector = ResponseSelector(table, pool, rng=FixedRandom(0))

    assert selector.generate_response(set()) == "Tell me more.\n"


def test_keyword_among_other_words(table, pool):
    selector = ResponseSelector(table, pool, rng=FixedRandom(0))

    assert selector.generate_response({"my", "app", "is", "slow"}) == "Upgrade your processor."


def test_multiple_keywords_pick_one_of_them(table, pool):
    selector = ResponseSelector(table, pool, rng=FixedRandom(0))

    response = selector.generate_response(frozenset({"crash", "slow"}))

    assert response in {"It never crashes on our system.", "Upgrade your processor."}


def test_seeded_fallback_is_reproducible(table):
    pool = DefaultResponsePool.build([f"default {i}\n" for i in range(8)])
    words = {"nothing", "matches"}

    first = ResponseSelector(table, pool, rng=random.Random(1234))
    second = ResponseSelector(table, pool, rng=random.Random(1234))

    run_a = [first.generate_response(words) for _ in range(25)]
    run_b = [second.generate_response(words) for _ in range(25)]

    assert run_a == run_b
    assert set(run_a) <= set(pool.responses())


def test_select_records_decision(table, pool):
    selector = ResponseSelector(table, pool, rng=FixedRandom(1))

    hit = selector.select({"crash"})
    miss = selector.select({"hello"})

    assert hit.record.source == "keyword"
    assert hit.record.keyword_hit == "crash"
    assert hit.record.default_index is None
    assert miss.record.source == "default"
    assert miss.record.default_index == 1
    assert miss.record.pool_size == 2
    assert miss.record.to_dict()["keyword_hit"] is None


def test_decision_log_emitted(table, pool, caplog):
    caplog.set_level(logging.INFO, logger="responder.selector")
    selector = ResponseSelector(table, pool, rng=FixedRandom(0), decision_log=True)

    selector.generate_response({"slow"})

    messages = [r.getMessage() for r in caplog.records if r.name == "responder.selector"]
    assert len(messages) == 1
    payload = json.loads(messages[0].split(" ", 1)[1])
    assert payload["source"] == "keyword"
    assert payload["keyword_hit"] == "slow"


def test_from_config(tmp_path):
    responses = tmp_path / "responses.txt"
    responses.write_text("hi\nHello there!\n", encoding="ascii")
    defaults = tmp_path / "default.txt"
    defaults.write_text("Tell me more.\n\nGo on.\n", encoding="ascii")
    config = ResponderConfig(
        responses_path=responses,
        defaults_path=defaults,
        source_encoding="ascii",
        random_seed=99,
        decision_log=False,
        log_level="INFO",
    )

    selector = ResponseSelector.from_config(config)
    again = ResponseSelector.from_config(config)

    assert selector.generate_response({"hi"}) == "Hello there!"
    assert selector.generate_response({"bye"}) in {"Tell me more.\n", "Go on.\n"}
    again.generate_response({"bye"})
    assert [selector.generate_response({"x"}) for _ in range(10)] == [
        again.generate_response({"y"}) for _ in range(10)
    ]


def test_from_config_with_missing_sources(tmp_path):
    config = ResponderConfig(
        responses_path=tmp_path / "nope.txt",
        defaults_path=tmp_path / "nope-either.txt",
        source_encoding="ascii",
        random_seed=None,
        decision_log=False,
        log_level="INFO",
    )

    selector = ResponseSelector.from_config(config)

    assert len(selector.table) == 0
    assert selector.generate_response({"hi"}) == "Could you elaborate on that?"
