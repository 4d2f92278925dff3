"""Graph pattern search over biological pathway models.

Patterns describe structural motifs (for example "a protein controls a
conversion that degrades another protein"). The searcher enumerates every
binding of a pattern over a pathway model, and miners turn those matches into
a simple interaction format (SIF) network.
"""

from .errors import GraphError, MinerConfigurationError, PatternError

__all__ = [
    "GraphError",
    "MinerConfigurationError",
    "PatternError",
]
