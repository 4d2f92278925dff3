"""Mining of pattern matches into SIF interactions."""

from .fetcher import CallableIDFetcher, HGNCIDFetcher, IDFetcher, as_id_fetcher
from .hgnc import HGNC, default_hgnc
from .miners import (
    MINER_FACTORIES,
    ConsecutiveCatalysisMiner,
    ControlsExpressionMiner,
    ControlsExpressionWithConvMiner,
    ControlsStateChangeButIsParticipantMiner,
    ControlsStateChangeMiner,
    DegradesMiner,
    InSameComplexMiner,
    MinerAdapter,
    SIFMiner,
    miners_for,
)
from .searcher import SIFSearcher
from .sif import SIFInteraction, SIFType
from .writer import write_sif

__all__ = [
    "HGNC",
    "MINER_FACTORIES",
    "CallableIDFetcher",
    "ConsecutiveCatalysisMiner",
    "ControlsExpressionMiner",
    "ControlsExpressionWithConvMiner",
    "ControlsStateChangeButIsParticipantMiner",
    "ControlsStateChangeMiner",
    "DegradesMiner",
    "HGNCIDFetcher",
    "IDFetcher",
    "InSameComplexMiner",
    "MinerAdapter",
    "SIFInteraction",
    "SIFMiner",
    "SIFSearcher",
    "SIFType",
    "as_id_fetcher",
    "default_hgnc",
    "miners_for",
    "write_sif",
]
