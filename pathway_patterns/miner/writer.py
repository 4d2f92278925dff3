"""Rendering of SIF interactions as tab separated text."""

from typing import Iterable, TextIO

from .sif import SIFInteraction


def sort_key(sif: SIFInteraction) -> tuple[str, str, str]:
    return (sif.source_id or "", sif.type, sif.target_id or "")


def write_sif(interactions: Iterable[SIFInteraction], out: TextIO, header: str | None = None) -> int:
    """
    Write one ``SOURCE<TAB>TYPE<TAB>TARGET`` line per interaction, sorted.

    Args:
        interactions: Interactions to write; the order given does not matter
        out: Text stream to write to
        header: Optional first line, e.g. "Upstream\\ttype\\tDownstream"

    Returns:
        The number of interaction lines written (the header is not counted)
    """
    if header:
        out.write(header.rstrip("\n") + "\n")
    count = 0
    for sif in sorted(interactions, key=sort_key):
        out.write(sif.to_sif_line() + "\n")
        count += 1
    return count
