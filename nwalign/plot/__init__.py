"""
nwalign plotting package.

Requires matplotlib and seaborn (pip install "nwalign[plot]").

Submodules:
    - plot.colors: Color constants
    - plot.matrix: score matrix heatmap with traceback path
"""

from .colors import (
    NT_COLOR,
    PATH_MOVE_COLORS,
    HEATMAP_COLORMAPS,
)

from .matrix import check_image_format, plot_score_matrix, save_score_matrix_plot


__all__ = [
    "NT_COLOR",
    "PATH_MOVE_COLORS",
    "HEATMAP_COLORMAPS",
    "check_image_format",
    "plot_score_matrix",
    "save_score_matrix_plot",
]
