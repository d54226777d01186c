"""
plotting.py
Win-share chart for strategy comparisons, saved to an image file.
"""

from typing import Dict

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt


def plot_win_share(results: Dict, seat: int, out_path: str) -> str:
    """
    Draw one bar per strategy showing how often `seat` won while playing it.
    Args:
        results (dict[str, SimulationSummary]): Output of compare_strategies().
        seat (int): Seat whose win share is plotted.
        out_path (str): Image path (format chosen by extension).
    Returns:
        str: out_path.
    """
    names = list(results.keys())
    win_perc = [results[n].win_share(seat) * 100.0 for n in names]
    fair_share = 100.0 / results[names[0]].num_players if names else 0.0

    width = max(6, int(len(names) * 0.9))
    plt.figure(figsize=(width, 4))
    bars = plt.bar(names, win_perc, color='C0')
    plt.axhline(fair_share, color='C3', linestyle='--', linewidth=1, label=f'fair share ({fair_share:.1f}%)')
    plt.ylabel('Win percentage (%)')
    plt.ylim(0, max(win_perc + [fair_share]) * 1.25 if names else 100)
    plt.title(f'Seat {seat} win% per across strategy')
    for rect, val in zip(bars, win_perc):
        plt.text(rect.get_x() + rect.get_width() / 2.0, rect.get_height() + 0.2, f"{val:.1f}%", ha='center', va='bottom', fontsize=8)
    plt.legend(loc='lower right', fontsize=8)
    plt.tight_layout()
    plt.savefig(out_path)
    plt.close()
    return out_path
