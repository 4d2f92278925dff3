#!/usr/bin/env python3
"""Mine a pathway model into a SIF network.

Reads a model saved as JSONL (see `InMemoryModel.save`), runs the miners of the
requested SIF types and writes ``SOURCE<TAB>TYPE<TAB>TARGET`` lines.

Usage:
    pathway-sif --model pathways.jsonl --hgnc hgnc_complete_set.txt --output network.sif
    python -m pathway_patterns.scripts.mine --model pathways.jsonl --types controls-state-change controls-degradation
"""

import argparse
import logging
import sys
from pathlib import Path

from ..config import get_settings
from ..errors import MinerConfigurationError
from ..miner import HGNC, HGNCIDFetcher, SIFSearcher, SIFType
from ..miner.hgnc import default_hgnc
from ..model import InMemoryModel


def sif_type(value: str) -> SIFType:
    try:
        return SIFType.parse(value)
    except MinerConfigurationError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def read_blacklist(path: Path) -> set[str]:
    """One URI per line; blank lines and lines starting with '#' are skipped."""
    uris = set()
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#"):
                uris.add(line)
    return uris


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Mine a pathway model into a SIF network")
    parser.add_argument("--model", type=Path, required=True, help="Model JSONL file")
    parser.add_argument(
        "--types",
        type=sif_type,
        nargs="+",
        default=None,
        help=f"SIF types to mine (default from settings). Choices: {', '.join(t.tag for t in SIFType)}",
    )
    parser.add_argument("--hgnc", type=Path, default=None, help="HGNC TSV download (overrides settings)")
    parser.add_argument("--blacklist", type=Path, default=None, help="File of ubiquitous molecule URIs, one per line")
    parser.add_argument("--output", type=Path, default=None, help="Output SIF file (default: stdout)")
    parser.add_argument("--no-header", action="store_true", help="Do not write a header line")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar over miners")
    return parser


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    types = args.types
    if types is None:
        try:
            types = [SIFType.parse(t) for t in settings.default_sif_types]
        except MinerConfigurationError as e:
            parser.error(str(e))

    if not args.model.exists():
        print(f"ERROR: Model file does not exist: {args.model}", file=sys.stderr)
        return 1

    hgnc = HGNC.from_file(args.hgnc) if args.hgnc else default_hgnc()
    blacklist = read_blacklist(args.blacklist) if args.blacklist else None

    model = InMemoryModel.load(args.model)
    searcher = SIFSearcher(
        *types,
        id_fetcher=HGNCIDFetcher(hgnc),
        blacklist=blacklist,
        show_progress=args.progress or settings.show_progress,
    )

    if args.output:
        with open(args.output, "w", encoding="utf-8") as out:
            count = searcher.search_sif_to(model, out, header=not args.no_header)
    else:
        count = searcher.search_sif_to(model, sys.stdout, header=not args.no_header)

    print(
        f"{len(model)} elements, {len(searcher.miners)} miners, {count} interactions"
        + (f" written to {args.output}" if args.output else ""),
        file=sys.stderr,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
