"""
Run a batch of Left-Right-Center games and print the aggregated statistics.
Usage: python scripts/run_simulation.py --games 1000000 --players 5 --chips 3 --strategies random
"""
import argparse

from left_right_center.analysis import serializer
from left_right_center.analysis.aggregate import run_batch
from left_right_center.core.config import CENTER_MODES, CENTER_POOL, GameConfig, InvalidConfiguration, parse_strategy_list


def print_summary(summary) -> None:
    print(f"Average #turns: {summary.running_average}")
    print(f"Max Turns: {summary.max_turns}")
    print(f"Min Turns: {summary.min_turns}")
    print("Winners")
    for seat, wins in enumerate(summary.wins):
        print(f"Player {seat} won {wins} times")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Monte-Carlo simulation of Left-Right-Center')
    parser.add_argument('--games', type=int, default=1000000, help='Number of games to simulate')
    parser.add_argument('--players', type=int, default=5, help='Number of players around the table')
    parser.add_argument('--chips', type=int, default=3, help='Starting chips per player')
    parser.add_argument('--strategies', type=str, default=None,
                        help='Across strategy for every seat, or a comma-separated list with one per seat')
    parser.add_argument('--center', type=str, default=CENTER_POOL, choices=CENTER_MODES,
                        help='Where center dice go: the center pool, or across the table (strategies apply)')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for a reproducible batch')
    parser.add_argument('--json', action='store_true', help='Print the summary as JSON')
    parser.add_argument('--verbose', action='store_true', help='Print progress while simulating')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        strategies = parse_strategy_list(args.strategies, args.players)
        cfg = GameConfig(
            num_players=args.players,
            starting_chips=args.chips,
            strategies=tuple(strategies) if strategies else None,
            center_mode=args.center,
            rng_seed=args.seed,
        )
        summary = run_batch(cfg, args.games, verbose=args.verbose)
    except InvalidConfiguration as e:
        raise SystemExit(f"Invalid configuration: {e}")

    if args.json:
        print(serializer.dumps(summary))
    else:
        print_summary(summary)


if __name__ == '__main__':
    main()
