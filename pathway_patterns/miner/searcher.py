"""
Mine a model into a SIF network.

`SIFSearcher` runs the miners of the requested SIF types over one shared
wrapper graph, keeps the interactions whose two ends resolved to identifiers,
and merges interactions with equal keys so that each relation appears once
with all of its supporting matches.
"""

import logging
from typing import Callable, Iterable, TextIO

from tqdm import tqdm

from ..config import get_settings
from ..graph import Graph
from ..model import BioPAXElement, ModelInterface
from ..pattern import Searcher
from .fetcher import HGNCIDFetcher, IDFetcher, as_id_fetcher
from .hgnc import default_hgnc
from .miners import DEFAULT_HEADER, MinerAdapter, miners_for
from .sif import SIFInteraction, SIFType
from .writer import write_sif

logger = logging.getLogger(__name__)


class SIFSearcher:
    """
    Searches models for the given SIF types.

    Args:
        *types: SIF types to mine, as members, tags or names
        id_fetcher: Names the ends of each interaction; HGNC symbols from
            ``settings.hgnc_file`` when omitted
        blacklist: Ubiquitous molecule URIs ignored by consecutive catalysis
        show_progress: Show a progress bar over miners; ``settings.show_progress`` when omitted

    Raises:
        MinerConfigurationError: A type is not a known SIF type

    Example:
        >>> searcher = SIFSearcher("controls-state-change", id_fetcher=lambda e: e.display_name)
        >>> for sif in searcher.search_sif(model):
        ...     print(sif.to_sif_line())
    """

    def __init__(
        self,
        *types: SIFType | str,
        id_fetcher: IDFetcher | Callable[[BioPAXElement], str | None] | None = None,
        blacklist: Iterable[str] | None = None,
        show_progress: bool | None = None,
    ):
        self.types: list[SIFType] = list(dict.fromkeys(SIFType.parse(t) for t in types))
        self.blacklist = frozenset(blacklist or ())
        self.miners: list[MinerAdapter] = []
        for sif_type in self.types:
            self.miners.extend(miners_for(sif_type, self.blacklist))

        if id_fetcher is None:
            self.id_fetcher: IDFetcher = HGNCIDFetcher(default_hgnc())
        else:
            self.id_fetcher = as_id_fetcher(id_fetcher)
        self.show_progress = get_settings().show_progress if show_progress is None else show_progress

    @property
    def header(self) -> str:
        """The miners' shared header line, or a generic one when they differ."""
        headers = {m.header for m in self.miners}
        return headers.pop() if len(headers) == 1 else DEFAULT_HEADER

    def search_sif(self, model: ModelInterface, graph: Graph | None = None) -> set[SIFInteraction]:
        """All interactions of the requested types found in `model`."""
        searcher = Searcher(model, graph)
        merged: dict[tuple, SIFInteraction] = {}
        for miner in tqdm(self.miners, desc="Mining", unit="miner", disable=not self.show_progress):
            matches = searcher.search(miner.pattern)
            n_matches = sum(len(v) for v in matches.values())
            logger.info("%s: %d matches", miner.name, n_matches)
            for match_list in matches.values():
                for match in match_list:
                    sif = miner.create_sif_interaction(match, self.id_fetcher)
                    if sif is None or not sif.has_ids() or sif.sif_type not in self.types:
                        continue
                    existing = merged.get(sif.key)
                    if existing is None:
                        merged[sif.key] = sif
                    else:
                        existing.merge_with(sif)
        logger.info("Mined %d interactions from %d elements", len(merged), len(model))
        return set(merged.values())

    def search_sif_to(self, model: ModelInterface, out: TextIO, header: bool = True) -> int:
        """Mine `model` and write the SIF text to `out`; return the number of interactions written."""
        return write_sif(self.search_sif(model), out, header=self.header if header else None)
