"""Matplotlib renderings of an HDOP grid: heatmap and pixel grid."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from ..analysis.overlay import cell_bounds, cell_opacity, heat_weight
from ..config import OVERLAY_TYPES
from ..core.grid import grid_to_arrays
from ..core.types import GridPoint, LatLng, Tower


# ------------------------------------------------------------------
# Internal helpers
# ------------------------------------------------------------------

def _annotate_towers(ax: plt.Axes, towers: Sequence[Tower], center: Optional[LatLng]) -> None:  # type: ignore[name-defined]
    for i, t in enumerate(towers):
        ax.plot(t.lng, t.lat, "^", color="lime", markersize=10, markeredgecolor="black",
                label="Tower" if i == 0 else None)
    if center is not None:
        ax.plot(center.lng, center.lat, "*", color="magenta", markersize=14,
                markeredgecolor="black", label="Cluster centre")


def _finish(
    fig: plt.Figure,  # type: ignore[name-defined]
    ax: plt.Axes,  # type: ignore[name-defined]
    title: str,
    save_path: Optional[str | Path],
) -> plt.Figure:  # type: ignore[name-defined]
    ax.set_xlabel("Longitude (deg)")
    ax.set_ylabel("Latitude (deg)")
    ax.set_title(title)
    ax.set_aspect("equal", adjustable="datalim")
    if ax.get_legend_handles_labels()[0]:
        ax.legend(loc="upper right", fontsize=8)
    fig.tight_layout()
    if save_path:
        fig.savefig(str(save_path), dpi=150)
    return fig


# ------------------------------------------------------------------
# Public API
# ------------------------------------------------------------------

def plot_hdop_heatmap(
    grid: Sequence[GridPoint],
    towers: Sequence[Tower] = (),
    center: Optional[LatLng] = None,
    save_path: Optional[str | Path] = None,
    figsize: tuple[int, int] = (10, 8),
) -> plt.Figure:  # type: ignore[name-defined]
    """Scatter heatmap, each sample weighted by ``1 / hdop``."""
    fig, ax = plt.subplots(figsize=figsize)
    if grid:
        lats, lngs, _ = grid_to_arrays(grid)
        weights = [heat_weight(p) for p in grid]
        sc = ax.scatter(lngs, lats, c=weights, cmap="inferno", s=40, marker="s", linewidths=0)
        cbar = fig.colorbar(sc, ax=ax)
        cbar.set_label("1 / HDOP")
    _annotate_towers(ax, towers, center)
    return _finish(fig, ax, "HDOP Heatmap", save_path)


def plot_pixel_grid(
    grid: Sequence[GridPoint],
    towers: Sequence[Tower] = (),
    center: Optional[LatLng] = None,
    save_path: Optional[str | Path] = None,
    figsize: tuple[int, int] = (10, 8),
) -> plt.Figure:  # type: ignore[name-defined]
    """One blue cell per sample, opacity ``min(1, 1 / hdop)``."""
    fig, ax = plt.subplots(figsize=figsize)
    for p in grid:
        (south, west), (north, east) = cell_bounds(p)
        ax.add_patch(Rectangle(
            (west, south), east - west, north - south,
            facecolor=(0.0, 0.0, 1.0, cell_opacity(p) * 0.6), edgecolor="none",
        ))
    if grid:
        ax.autoscale_view()
    _annotate_towers(ax, towers, center)
    return _finish(fig, ax, "HDOP Pixel Grid", save_path)


def plot_overlay(
    kind: str,
    grid: Sequence[GridPoint],
    towers: Sequence[Tower] = (),
    center: Optional[LatLng] = None,
    save_path: Optional[str | Path] = None,
) -> plt.Figure:  # type: ignore[name-defined]
    """Dispatch to the heatmap or pixel-grid renderer.

    Raises
    ------
    ValueError
        If *kind* is not one of :data:`OVERLAY_TYPES`.
    """
    if kind == "heatmap":
        return plot_hdop_heatmap(grid, towers, center, save_path=save_path)
    if kind == "pixel_grid":
        return plot_pixel_grid(grid, towers, center, save_path=save_path)
    raise ValueError(f"Unknown overlay type '{kind}'. Choose from: " + ", ".join(OVERLAY_TYPES))
