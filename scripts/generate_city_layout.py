#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Generate a city layout from a repository snapshot and write it as JSON.

The input is the JSON document produced by the retrieval layer (either the bare
repository object or the API envelope with a `data` field). The output holds
`buildings`, `districts`, `roads` and `gridSize` in the shape the renderer expects.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate a CodeCity layout from repository data.")
    parser.add_argument("--input", type=Path, required=True, help="Repository JSON file from the retrieval layer.")
    parser.add_argument("--output", type=Path, required=True, help="Where to write the layout JSON.")
    parser.add_argument("--config", type=Path, default=None, help="Optional YAML file overriding the defaults.")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed (default: derived from owner/repo).")
    parser.add_argument("--verbose", action="store_true", help="Log per-district details.")
    args = parser.parse_args()

    from codecity.citygen.city import CityGenerator
    from codecity.config import Config
    from codecity.utils.data_exporter import DataExporter
    from codecity.utils.load_json import load_repo_data
    from codecity.utils.logger import Logger

    config = Config(str(args.config)) if args.config else Config()
    Logger.configure_from(config)
    logger = Logger.get_logger("generate_city_layout")
    if args.verbose:
        for handler in Logger.get_logger().handlers:
            handler.setLevel("DEBUG")

    repo_data = load_repo_data(args.input, config["citygen.lines.bytes_per_line"])
    layout = CityGenerator(config, seed=args.seed).generate(repo_data)
    DataExporter(layout).export_to_json(str(args.output))

    logger.info(
        f"Wrote {len(layout.buildings)} buildings, {len(layout.districts)} districts, "
        f"{len(layout.roads)} roads to {args.output}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
