"""
Loaders for the keyword and default response source files.

Keyword file format::

    hello, hi, hey
    Hi there. What seems to be the problem?

    slow
    Which part of the system feels slow to you?

A trimmed line that contains a comma, or has no space in it, is a keyword
header. The line right after it is taken verbatim as the response. Lines with
several space-separated words and no comma are skipped, so a response can
never be written as a comma list or a single word on its own.

Default file format: blocks of lines separated by an empty line. Each block
becomes one response with every line terminated by a newline.

Neither loader raises on a missing or unreadable file. The problem is logged
and whatever was parsed before it is used.
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from .defaults import DefaultResponsePool
from .keywords import KeywordGroup, ResponseTable

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "ascii"


def _strip_terminator(line: str) -> str:
    return line.rstrip("\r\n")


def _is_header(line: str) -> bool:
    return "," in line or " " not in line


def _split_keywords(line: str) -> List[str]:
    fields = line.split(",")
    # Trailing empty fields are not keywords ("a,b," has two).
    while fields and fields[-1] == "":
        fields.pop()
    return [field.strip() for field in fields]


def parse_keyword_lines(lines: Iterable[str]) -> Iterator[KeywordGroup]:
    """Yield ``(keywords, response)`` pairs from keyword source lines."""
    it = iter(lines)
    for raw in it:
        line = raw.strip()
        if not line:
            continue
        if not _is_header(line):
            logger.debug("Skipping non-header line: %r", line)
            continue
        keywords = _split_keywords(line)
        response: Optional[str] = next(it, None)
        if response is None:
            logger.debug("Header %r has no response line, dropped", line)
            return
        yield keywords, _strip_terminator(response)


def parse_default_lines(lines: Iterable[str]) -> Iterator[str]:
    """Yield one response per block of default source lines."""
    it = iter(lines)
    for raw in it:
        first = raw.strip()
        if not first:
            continue
        block = [first]
        for following in it:
            following = _strip_terminator(following)
            if not following:
                break
            block.append(following)
        yield "".join(f"{line}\n" for line in block)


def load_response_table(
    path: Union[str, Path], encoding: str = DEFAULT_ENCODING
) -> ResponseTable:
    path = Path(path)
    pairs: List[KeywordGroup] = []
    try:
        with path.open("r", encoding=encoding) as handle:
            for pair in parse_keyword_lines(handle):
                pairs.append(pair)
    except FileNotFoundError:
        logger.error("Unable to open %s", path)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("A problem was encountered reading %s: %s", path, exc)

    table = ResponseTable.build(pairs)
    logger.info("Loaded %d keywords from %s", len(table), path)
    for entry in table.entries():
        logger.debug("%s: %s", entry.keyword, entry.response)
    return table


def load_default_pool(
    path: Union[str, Path], encoding: str = DEFAULT_ENCODING
) -> DefaultResponsePool:
    path = Path(path)
    entries: List[str] = []
    try:
        with path.open("r", encoding=encoding) as handle:
            for entry in parse_default_lines(handle):
                entries.append(entry)
    except FileNotFoundError:
        logger.error("Unable to open %s", path)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("A problem was encountered reading %s: %s", path, exc)

    if not entries:
        logger.warning("No default responses in %s, using built-in fallback", path)
    pool = DefaultResponsePool.build(entries)
    logger.info("Loaded %d default responses from %s", len(pool), path)
    for index, response in enumerate(pool.responses()):
        logger.debug("%d: %s", index, response)
    return pool
