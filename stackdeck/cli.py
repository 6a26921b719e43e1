"""Command line helpers for StackDeck."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from random import Random

from rich.console import Console
from rich.table import Table

from .config import StackDeckConfig
from .diagnostics.checklist import run_checklist
from .diagnostics.draw_simulator import DrawSimulator
from .domain.draw_engine import DrawEngine
from .domain.exceptions import UnknownUpgradeTypeError
from .domain.offline import OfflineProgressionSimulator
from .domain.pool import WeightedPool
from .domain.upgrades import UpgradeCollection, UpgradeEffectResolver
from .loaders import load_card_sources, parse_pool_dict, validate_pool_file

console = Console()


def run_simulator() -> None:
    parser = argparse.ArgumentParser(description="StackDeck draw distribution simulator")
    _add_pool_arguments(parser)
    parser.add_argument("--pulls", type=int, default=10000, help="Number of decks to open")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible runs")
    args = parser.parse_args()
    _configure_logging(args.verbose)

    config = StackDeckConfig.from_env()
    pool = _load_pool(args)
    upgrades = UpgradeCollection.create(_parse_levels(args.levels))

    engine = DrawEngine(UpgradeEffectResolver(config.draw), clock=lambda: 0.0)
    simulator = DrawSimulator(engine, rng=Random(args.seed))
    result = simulator.simulate(pool, upgrades, pulls=args.pulls)

    table = Table(title=f"{result.pulls} decks opened")
    table.add_column("Card")
    table.add_column("Tier")
    table.add_column("Count", justify="right")
    table.add_column("Share", justify="right")
    for card in sorted(pool, key=lambda c: result.card_counts[c.name], reverse=True):
        count = result.card_counts[card.name]
        if not count:
            continue
        table.add_row(card.name, str(card.quality_tier.value), str(count), f"{result.share(card.name):.2%}")
    console.print(table)
    console.print(f"Total value: [bold]{result.total_value:g}[/bold], mean per deck: {result.mean_value:.2f}")
    for issue in run_checklist(pool):
        console.print(f"[yellow][{issue.severity.upper()}][/yellow] {issue.message}")


def run_offline() -> None:
    parser = argparse.ArgumentParser(description="StackDeck offline progression calculator")
    _add_pool_arguments(parser)
    parser.add_argument("--last", type=float, required=True, help="Last session timestamp (seconds)")
    parser.add_argument("--now", type=float, required=True, help="Current timestamp (seconds)")
    parser.add_argument("--decks", type=int, default=0, help="Decks available to auto-open")
    args = parser.parse_args()
    _configure_logging(args.verbose)

    config = StackDeckConfig.from_env()
    pool = _load_pool(args)
    upgrades = UpgradeCollection.create(_parse_levels(args.levels))
    engine = DrawEngine(UpgradeEffectResolver(config.draw))
    simulator = OfflineProgressionSimulator(engine, config=config.offline)
    result = simulator.calculate(args.last, args.now, upgrades, pool, args.decks)

    console.print(f"Simulated {result.elapsed_seconds_simulated:g} s" + (" (capped)" if result.was_capped else ""))
    console.print(f"Decks opened: {result.decks_consumed}, produced: {result.decks_produced}")
    console.print(f"Score gained: [bold green]{result.total_score_gained:g}[/bold green]")


def run_validate() -> None:
    parser = argparse.ArgumentParser(description="StackDeck card pool validator")
    parser.add_argument("pool", help="Path to card pool JSON file")
    args = parser.parse_args()

    errors = validate_pool_file(Path(args.pool))
    if errors:
        console.print("[red]Card pool errors:[/red]")
        for err in errors:
            console.print(f"- {err}")
        sys.exit(1)
    console.print("Card pool is valid ✅")


def _add_pool_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("pool", help="Card pool JSON file, or card list when --values is given")
    parser.add_argument("--values", help="Card value JSON keyed by detailsId")
    parser.add_argument(
        "--levels",
        default="{}",
        help='Upgrade levels as JSON, e.g. \'{"luckyDrop": 2, "autoOpening": 1}\'',
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")


def _load_pool(args: argparse.Namespace) -> WeightedPool:
    if args.values:
        return WeightedPool(load_card_sources(args.pool, args.values))
    data = json.loads(Path(args.pool).read_text(encoding="utf-8"))
    return WeightedPool(parse_pool_dict(data).cards)


def _parse_levels(raw: str) -> dict[str, int]:
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid JSON for --levels: {exc}") from exc
    if not isinstance(data, dict):
        raise SystemExit("--levels must be a JSON object")
    try:
        levels = {str(k): int(v) for k, v in data.items()}
        UpgradeCollection.create(levels)
    except (TypeError, ValueError, UnknownUpgradeTypeError) as exc:
        raise SystemExit(f"Invalid --levels: {exc}") from exc
    return levels


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
