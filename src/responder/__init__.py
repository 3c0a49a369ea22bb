"""
Keyword-triggered canned responses.

A ResponseTable maps keywords to responses, a DefaultResponsePool holds the
fallbacks, and a ResponseSelector combines the two.
"""

from .config import ResponderConfig, load_config
from .defaults import FALLBACK_RESPONSE, DefaultResponsePool
from .keywords import KeywordEntry, ResponseTable
from .selector import ResponseSelector, Selection
from .sources import load_default_pool, load_response_table

__all__ = [
    'ResponderConfig', 'load_config',
    'FALLBACK_RESPONSE', 'DefaultResponsePool',
    'KeywordEntry', 'ResponseTable',
    'ResponseSelector', 'Selection',
    'load_default_pool', 'load_response_table',
]
