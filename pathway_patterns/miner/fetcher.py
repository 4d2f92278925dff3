"""Identifier fetchers: how an element is named in a SIF line."""

from abc import ABC, abstractmethod
from typing import Callable

from ..model import BioPAXElement, XReferrable
from .hgnc import HGNC


class IDFetcher(ABC):
    """Returns an identifier for an element, or None when it has none."""

    @abstractmethod
    def fetch_id(self, element: BioPAXElement) -> str | None:
        pass

    def __call__(self, element: BioPAXElement) -> str | None:
        return self.fetch_id(element)


class HGNCIDFetcher(IDFetcher):
    """
    Name elements by HGNC symbol.

    The first xref whose database starts with "hgnc" (case-insensitive) and
    whose id resolves to a non-empty symbol wins.
    """

    def __init__(self, hgnc: HGNC):
        self.hgnc = hgnc

    def fetch_id(self, element):
        if not isinstance(element, XReferrable):
            return None
        for xref in element.xrefs:
            if xref.db is None or not xref.db.lower().startswith("hgnc"):
                continue
            if xref.id is None:
                continue
            symbol = self.hgnc.get_symbol(xref.id)
            if symbol:
                return symbol
        return None


class CallableIDFetcher(IDFetcher):
    """Adapts a plain function to the fetcher interface."""

    def __init__(self, func: Callable[[BioPAXElement], str | None]):
        self.func = func

    def fetch_id(self, element):
        return self.func(element)


def as_id_fetcher(fetcher: IDFetcher | Callable[[BioPAXElement], str | None]) -> IDFetcher:
    if isinstance(fetcher, IDFetcher):
        return fetcher
    if callable(fetcher):
        return CallableIDFetcher(fetcher)
    raise TypeError(f"Expected an IDFetcher or a callable, got {type(fetcher).__name__}")
