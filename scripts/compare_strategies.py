"""
Compare across strategies for one seat on an odd-sized table and optionally save a win% chart.
Usage: python scripts/compare_strategies.py --players 3 --games 2000 --seat 0 --chart data/win_share.png
"""
import os
import argparse

from left_right_center.analysis import serializer
from left_right_center.analysis.aggregate import compare_strategies
from left_right_center.analysis.plotting import plot_win_share
from left_right_center.core.config import (
    CENTER_ACROSS, CENTER_MODES, CENTER_POOL, GameConfig, InvalidConfiguration, parse_strategy_list,
)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Compare one seat's across strategies in Left-Right-Center")
    parser.add_argument('--games', type=int, default=2000, help='Games per strategy')
    parser.add_argument('--players', type=int, default=3, help='Number of players around the table')
    parser.add_argument('--chips', type=int, default=3, help='Starting chips per player')
    parser.add_argument('--strategies', type=str, default=None,
                        help='Strategies of the other seats: one name for all, or one per seat')
    parser.add_argument('--candidates', type=str, default=None,
                        help='Comma-separated strategies to try for the seat (default: all registered)')
    parser.add_argument('--center', type=str, default=CENTER_ACROSS, choices=CENTER_MODES,
                        help='Where center dice go; strategies only matter across the table')
    parser.add_argument('--seat', type=int, default=0, help='Seat whose strategy is varied')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed; every batch restarts from it')
    parser.add_argument('--chart', type=str, default=None, help='Path of a win%% bar chart to save')
    parser.add_argument('--json', action='store_true', help='Print the results as JSON')
    args = parser.parse_args(argv)

    if args.center == CENTER_POOL:
        print("Note: center dice go to the pool; strategies have no effect.")
    elif args.players % 2 == 0:
        print(f"Note: with {args.players} players every center die goes straight across; strategies have no effect.")

    try:
        strategies = parse_strategy_list(args.strategies, args.players)
        candidates = parse_strategy_list(args.candidates, 1)
        cfg = GameConfig(
            num_players=args.players,
            starting_chips=args.chips,
            strategies=tuple(strategies) if strategies else None,
            center_mode=args.center,
            rng_seed=args.seed,
        )
        results = compare_strategies(cfg, args.games, seat=args.seat, strategy_names=candidates, verbose=not args.json)
    except InvalidConfiguration as e:
        raise SystemExit(f"Invalid configuration: {e}")

    if args.json:
        print(serializer.dumps(results))
    else:
        print(f"{'strategy':<10} {'win%':>8} {'avg turns':>10} {'min':>6} {'max':>6}")
        for name, summary in results.items():
            print(f"{name:<10} {summary.win_share(args.seat) * 100.0:>7.2f}% {summary.running_average:>10.3f} "
                  f"{summary.min_turns:>6} {summary.max_turns:>6}")

    if args.chart:
        out_dir = os.path.dirname(args.chart)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        plot_win_share(results, args.seat, args.chart)
        print(f"Win percentage chart: {args.chart}")


if __name__ == '__main__':
    main()
