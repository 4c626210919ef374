from .coverage import AnalysisResult, analyze, coverage_stats
from .overlay import heat_weight, cell_opacity, cell_bounds

__all__ = ["AnalysisResult", "analyze", "coverage_stats", "heat_weight", "cell_opacity", "cell_bounds"]
