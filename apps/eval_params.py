from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path

from metricparams.api import evaluate_key
from metricparams.configuration import load_plugin_config
from metricparams.registry import MetricSet
from plugins.postgres import METRICS as POSTGRES_METRICS
from plugins.postgres import PostgresConfig
from plugins.web_check import METRICS as WEB_METRICS


def build_registry() -> MetricSet:
    return MetricSet({**POSTGRES_METRICS, **WEB_METRICS})


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Evaluate metric parameters against a config.")
    parser.add_argument("key", nargs="?", help="Metric key, e.g. pgsql.ping")
    parser.add_argument("params", nargs="*", help="Raw positional parameters")
    parser.add_argument(
        "--config",
        dest="config_yaml",
        type=Path,
        default=None,
        help="Optional plugin YAML with named sessions",
    )
    parser.add_argument(
        "--section",
        default=None,
        help="Nested section of the YAML holding the plugin config",
    )
    parser.add_argument("--list", action="store_true", help="List supported metric keys")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    registry = build_registry()

    if args.list:
        listing = registry.list()
        for key, description in zip(listing[::2], listing[1::2], strict=True):
            print(f"{key}\t{description}")
        return 0

    if not args.key:
        print("error: metric key is required", file=sys.stderr)
        return 2

    sessions = {}
    if args.config_yaml is not None:
        config = load_plugin_config(args.config_yaml, PostgresConfig, section=args.section)
        sessions = config.sessions

    result = evaluate_key(args.key, args.params, registry=registry, sessions=sessions)
    print(json.dumps(asdict(result), indent=2, sort_keys=True))
    return 0 if result.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
