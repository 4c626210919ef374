#!/usr/bin/env python3
"""Basic HDOP coverage example.

Places four towers around a city block plus one stray tower, analyzes
coverage at ~10 m precision, prints a report and saves both overlays.
"""

from tower_hdop.analysis import analyze, coverage_stats
from tower_hdop.core import Tower, locate
from tower_hdop.io import save_towers
from tower_hdop.visualization import plot_hdop_heatmap, plot_pixel_grid


def main() -> None:
    # --- Towers (San Francisco, ~300 m block) ---
    towers = [
        Tower(lat=37.7740, lng=-122.4205, id=1),
        Tower(lat=37.7740, lng=-122.4175, id=2),
        Tower(lat=37.7765, lng=-122.4175, id=3),
        Tower(lat=37.7765, lng=-122.4205, id=4),
        Tower(lat=37.8044, lng=-122.2712, id=5),  # Oakland, its own cluster
    ]

    # --- Analyze ---
    precision = 0.0001
    block = towers[:4]
    center = locate(towers)
    result = analyze(block, precision)
    stats = coverage_stats(result.grid)

    print("=" * 50)
    print("Tower HDOP — Coverage Report")
    print("=" * 50)
    print(f"  {'map centre':>20s}: {center.lat:.6f}, {center.lng:.6f}")
    for k, v in stats.items():
        print(f"  {k:>20s}: {v}")
    print("=" * 50)

    # --- Overlays ---
    plot_hdop_heatmap(result.grid, block, center, save_path="hdop_heatmap.png")
    plot_pixel_grid(result.grid, block, center, save_path="hdop_pixel_grid.png")
    print("Overlays saved: hdop_heatmap.png, hdop_pixel_grid.png")

    save_towers("towers.json", towers, precision)
    print("Towers saved: towers.json")


if __name__ == "__main__":
    main()
