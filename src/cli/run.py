import argparse
import asyncio
import json
import logging
import sys
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from core.entities import BlendResult, Track
from services.config import load_config
from services.logging import setup_logging
from workflows.blend_pipeline import BlendConfigError, create_pipeline_from_config

logger = logging.getLogger(__name__)


def parse_sources(data: Any) -> Dict[str, List[Track]]:
    """
    Accepts either {"source_id": [track, ...], ...} or
    [{"source": "source_id", "tracks": [track, ...]}, ...].
    """
    if isinstance(data, dict):
        pairs = list(data.items())
    elif isinstance(data, list):
        pairs = [(entry["source"], entry.get("tracks", [])) for entry in data]
    else:
        raise ValueError("Sources file must contain a mapping or a list")

    sources: Dict[str, List[Track]] = {}
    for source_id, tracks in pairs:
        if str(source_id) in sources:
            raise ValueError(f"Duplicate source id: {source_id}")
        sources[str(source_id)] = [Track.from_dict(t) for t in tracks or []]
    return sources


def load_sources(path: Path) -> Dict[str, List[Track]]:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        data = json.loads(text)
    else:
        data = yaml.safe_load(text)
    return parse_sources(data)


def write_result(result: BlendResult, output: Optional[Path]) -> None:
    payload = json.dumps(result.to_dict(), indent=2, ensure_ascii=False)

    if output is None:
        print(payload)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(payload, encoding="utf-8")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="track-blend",
        description="Blend several listeners' top tracks into one playlist",
    )
    parser.add_argument("sources", type=Path, help="JSON or YAML file with each source's ranked tracks")
    parser.add_argument("--config", help="Path to config.yml (default: resources/config.yml)")
    parser.add_argument("--total", type=int, help="Number of tracks in the blend")
    parser.add_argument("--mode", choices=["shuffle-only", "similarity"], help="Sequencing mode")
    parser.add_argument("--seed", type=int, help="Seed for reproducible shuffling")
    parser.add_argument(
        "--exclude-instrumentals",
        action="store_true",
        default=None,
        help="Drop instrumental / karaoke versions before blending",
    )
    parser.add_argument("--output", "-o", type=Path, help="Write the blend here instead of stdout")
    return parser


async def main(argv: Optional[Sequence[str]] = None) -> int:
    start_time = time.perf_counter()
    args = build_parser().parse_args(argv)

    config = load_config(args.config)
    setup_logging(config.LOG_LEVEL)

    if args.seed is not None:
        config.blend.seed = args.seed

    pipeline = create_pipeline_from_config(config)

    try:
        options = pipeline.options(
            total_tracks=args.total,
            sequencing_mode=args.mode,
            exclude_instrumentals=args.exclude_instrumentals,
        )
    except BlendConfigError as e:
        logger.error(str(e))
        return 2

    try:
        sources = load_sources(args.sources)
    except (OSError, KeyError, TypeError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Could not load sources from {args.sources}: {e!r}")
        return 2

    logger.info(f"Loaded {len(sources)} sources from {args.sources}")

    result = await pipeline.run(sources, options)
    write_result(result, args.output)

    end_time = time.perf_counter()
    logger.info(f"Total time: {end_time - start_time}")
    return 0


def cli() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
