from .overlay import plot_hdop_heatmap, plot_pixel_grid, plot_overlay

__all__ = ["plot_hdop_heatmap", "plot_pixel_grid", "plot_overlay"]
