"""
Miners: a pattern plus the rule that turns each of its matches into a SIF interaction.

Every miner names the label holding the source entity reference, the label
holding the target one, and the labels whose elements carry publication
references worth reporting as evidence.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Iterable, TextIO

from ..model import BioPAXElement, Control, is_inhibitory
from ..pattern import (
    Match,
    Pattern,
    consecutive_catalysis,
    controls_expression,
    controls_expression_with_conversion,
    controls_state_change,
    controls_state_change_but_is_participant,
    degradation,
    in_same_complex,
)
from .fetcher import IDFetcher, as_id_fetcher
from .sif import SIFInteraction, SIFType, pubmed_ids
from .writer import write_sif

logger = logging.getLogger(__name__)

DEFAULT_HEADER = "Source\ttype\tTarget"


class SIFMiner(ABC):
    """Converts matches of one pattern into SIF interactions."""

    name: str
    sif_type: SIFType

    @property
    @abstractmethod
    def pattern(self) -> Pattern:
        pass

    @abstractmethod
    def create_sif_interaction(self, match: Match, fetcher: IDFetcher) -> SIFInteraction | None:
        pass


class MinerAdapter(SIFMiner):
    """
    Shared behaviour of the concrete miners.

    Subclasses set the class attributes and implement `construct_pattern`.
    The pattern is built on first use and cached.

    Attributes:
        name: Short miner name used in logs
        description: One sentence about what the miner finds
        sif_type: SIF type of every interaction produced
        source_label: Pattern label of the source entity reference
        target_label: Pattern label of the target entity reference
        harvestable_labels: Labels whose elements' publication xrefs are collected
        header: First line of a SIF file written from this miner alone
    """

    name: str = "miner"
    description: str = ""
    sif_type: SIFType
    source_label: str
    target_label: str
    harvestable_labels: tuple[str, ...] = ()
    header: str = DEFAULT_HEADER

    def __init__(self):
        self._pattern: Pattern | None = None

    @abstractmethod
    def construct_pattern(self) -> Pattern:
        pass

    @property
    def pattern(self) -> Pattern:
        if self._pattern is None:
            self._pattern = self.construct_pattern()
        return self._pattern

    def is_directed(self) -> bool:
        return self.sif_type.directed

    def get_relation_type(self, match: Match) -> str:
        """The relation written to the SIF line; the SIF tag unless a miner refines it."""
        return self.sif_type.tag

    def _harvest_pubmed_ids(self, match: Match) -> set[str]:
        ids: set[str] = set()
        for label in self.harvestable_labels:
            ids.update(pubmed_ids(match.get(label)))
        return ids

    def create_sif_interaction(self, match, fetcher):
        """The interaction a match stands for, or None when either end has no identifier."""
        source_id = fetcher(match.get(self.source_label))
        target_id = fetcher(match.get(self.target_label))
        if not source_id or not target_id:
            logger.debug("%s: dropping %r, unresolved identifier", self.name, match)
            return None
        return SIFInteraction(
            source_id=source_id,
            target_id=target_id,
            type=self.get_relation_type(match),
            sif_type=self.sif_type,
            directed=self.is_directed(),
            matches=[match],
            pubmed_ids=self._harvest_pubmed_ids(match),
        )

    def interactions(
        self, matches: dict[BioPAXElement, list[Match]], fetcher: IDFetcher | Callable
    ) -> list[SIFInteraction]:
        """Merge the interactions of all `matches`, keeping first-seen order."""
        fetcher = as_id_fetcher(fetcher)
        merged: dict[tuple, SIFInteraction] = {}
        for match_list in matches.values():
            for match in match_list:
                sif = self.create_sif_interaction(match, fetcher)
                if sif is None:
                    continue
                if sif.key in merged:
                    merged[sif.key].merge_with(sif)
                else:
                    merged[sif.key] = sif
        return list(merged.values())

    def write_result(
        self, matches: dict[BioPAXElement, list[Match]], out: TextIO, fetcher: IDFetcher | Callable
    ) -> int:
        """Write the interactions of `matches` as SIF text, with this miner's header; return the line count."""
        return write_sif(self.interactions(matches, fetcher), out, header=self.header)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class DegradesMiner(MinerAdapter):
    name = "degrades"
    description = "Finds proteins controlling the degradation of other proteins."
    sif_type = SIFType.CONTROLS_DEGRADATION
    source_label = "upstream PR"
    target_label = "downstream PR"
    harvestable_labels = ("Control", "Conversion")
    header = "Upstream\ttype\tDownstream"

    def construct_pattern(self):
        return degradation()

    def get_relation_type(self, match):
        control = match.get("Control")
        if isinstance(control, Control) and is_inhibitory(control.control_type):
            return "blocks-degradation"
        return "degrades"


class ControlsStateChangeMiner(MinerAdapter):
    name = "controls-state-change"
    description = "Finds proteins controlling a reaction that changes the state of another protein."
    sif_type = SIFType.CONTROLS_STATE_CHANGE
    source_label = "controller PR"
    target_label = "changed PR"
    harvestable_labels = ("Control", "Conversion")
    header = "Controller\ttype\tChanged"

    def construct_pattern(self):
        return controls_state_change()


class ControlsStateChangeButIsParticipantMiner(MinerAdapter):
    name = "controls-state-change-but-is-participant"
    description = "Finds proteins that take part unchanged in a reaction changing another protein."
    sif_type = SIFType.CONTROLS_STATE_CHANGE
    source_label = "controller PR"
    target_label = "changed PR"
    harvestable_labels = ("Conversion",)
    header = "Controller\ttype\tChanged"

    def construct_pattern(self):
        return controls_state_change_but_is_participant()


class ControlsExpressionMiner(MinerAdapter):
    name = "controls-expression"
    description = "Finds transcription factors controlling the expression of a protein."
    sif_type = SIFType.CONTROLS_EXPRESSION
    source_label = "TF PR"
    target_label = "product PR"
    harvestable_labels = ("Control", "TempReac")
    header = "TF\ttype\tProduct"

    def construct_pattern(self):
        return controls_expression()


class ControlsExpressionWithConvMiner(MinerAdapter):
    name = "controls-expression-with-conversion"
    description = "Finds expression control recorded as a conversion without inputs."
    sif_type = SIFType.CONTROLS_EXPRESSION
    source_label = "TF PR"
    target_label = "product PR"
    harvestable_labels = ("Control", "Conversion")
    header = "TF\ttype\tProduct"

    def construct_pattern(self):
        return controls_expression_with_conversion()


class ConsecutiveCatalysisMiner(MinerAdapter):
    """
    Catalysts of consecutive reactions.

    Args:
        blacklist: URIs of ubiquitous small molecules (or their references)
            that do not count as linking two reactions
    """

    name = "consecutive-catalysis"
    description = "Finds proteins catalyzing consecutive reactions."
    sif_type = SIFType.CONSECUTIVE_CATALYSIS
    source_label = "first ER"
    target_label = "second ER"
    harvestable_labels = ("first Control", "first Conversion", "second Control", "second Conversion")
    header = "First\ttype\tSecond"

    def __init__(self, blacklist: Iterable[str] | None = None):
        super().__init__()
        self.blacklist = frozenset(blacklist or ())

    def construct_pattern(self):
        return consecutive_catalysis(self.blacklist)


class InSameComplexMiner(MinerAdapter):
    """
    Members of the same complex, as an undirected relation.

    Args:
        sif_type: IN_SAME_COMPLEX or INTERACTS_WITH; decides the tag written
    """

    name = "in-same-complex"
    description = "Finds proteins that are members of the same complex."
    source_label = "first ER"
    target_label = "second ER"
    harvestable_labels = ("Complex",)
    header = "First\ttype\tSecond"

    def __init__(self, sif_type: SIFType = SIFType.IN_SAME_COMPLEX):
        super().__init__()
        if sif_type not in (SIFType.IN_SAME_COMPLEX, SIFType.INTERACTS_WITH):
            raise ValueError(f"InSameComplexMiner cannot produce {sif_type.tag}")
        self.sif_type = sif_type

    def construct_pattern(self):
        return in_same_complex()


MinerFactory = Callable[[frozenset], MinerAdapter]

MINER_FACTORIES: dict[SIFType, tuple[MinerFactory, ...]] = {
    SIFType.CONTROLS_STATE_CHANGE: (
        lambda blacklist: ControlsStateChangeMiner(),
        lambda blacklist: ControlsStateChangeButIsParticipantMiner(),
    ),
    SIFType.CONTROLS_EXPRESSION: (
        lambda blacklist: ControlsExpressionMiner(),
        lambda blacklist: ControlsExpressionWithConvMiner(),
    ),
    SIFType.CONTROLS_DEGRADATION: (lambda blacklist: DegradesMiner(),),
    SIFType.CONSECUTIVE_CATALYSIS: (lambda blacklist: ConsecutiveCatalysisMiner(blacklist),),
    SIFType.IN_SAME_COMPLEX: (lambda blacklist: InSameComplexMiner(SIFType.IN_SAME_COMPLEX),),
    SIFType.INTERACTS_WITH: (lambda blacklist: InSameComplexMiner(SIFType.INTERACTS_WITH),),
}

_unmapped = set(SIFType) - set(MINER_FACTORIES)
if _unmapped:
    raise RuntimeError(f"SIF types without miners: {sorted(t.tag for t in _unmapped)}")


def miners_for(sif_type: SIFType, blacklist: Iterable[str] | None = None) -> list[MinerAdapter]:
    """Fresh miners producing `sif_type`."""
    frozen = frozenset(blacklist or ())
    return [factory(frozen) for factory in MINER_FACTORIES[sif_type]]
