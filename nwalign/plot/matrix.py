"""
Score matrix visualization for nwalign.

Draws the (n+1, m+1) NW score matrix as an annotated heatmap with the
traceback path overlaid.
"""

from pathlib import Path
from typing import Dict, Optional, Tuple, Union

import numpy as np
import matplotlib.pyplot as plt
import seaborn as sns
from matplotlib.backend_bases import FigureCanvasBase

from .colors import NT_COLOR, PATH_MOVE_COLORS, HEATMAP_COLORMAPS
from ..errors import OutputWriteFailure

grid_color_map = HEATMAP_COLORMAPS['diverging']


def plot_score_matrix(
    result,  # AlignmentResult with return_data=True
    X: str,
    Y: str,
    nt_color_map: Optional[Dict[str, str]] = None,
    figsize: Optional[Tuple[float, float]] = None,
    marker_size: int = 18,
    marker_width: int = 2,
    marker_style: str = 's',
    colormap: str = grid_color_map,
    annotate: bool = True,
    title: Optional[str] = None,
    ax=None,
) -> plt.Figure:
    """
    Plot the NW score matrix as a heatmap with the traceback path.

    Parameters
    ----------
    result : AlignmentResult
        Result from align_global(..., return_data=True).
    X : str
        First sequence (rows).
    Y : str
        Second sequence (columns).
    nt_color_map : dict, optional
        Mapping nucleotides to colors for axis labels.
    figsize : tuple, optional
        Figure size; scaled to the matrix when omitted.
    marker_size, marker_width, marker_style
        Appearance of the path markers.  Marker colors follow the move
        that entered each cell (PATH_MOVE_COLORS).
    annotate : bool
        Write the score in every cell.
    ax : matplotlib.axes.Axes, optional
        Axes to plot on.

    Returns
    -------
    fig : matplotlib.Figure
    """
    F = result.data
    if F is None:
        raise ValueError("result has no score matrix; align with return_data=True")
    if nt_color_map is None:
        nt_color_map = NT_COLOR

    n, m = F.shape
    if ax is None:
        if figsize is None:
            figsize = (max(4.0, 0.6 * m + 1.5), max(3.0, 0.6 * n + 1.0))
        fig, ax = plt.subplots(1, 1, figsize=figsize)
    else:
        fig = ax.get_figure()

    cmap = sns.color_palette(colormap, as_cmap=True)
    xticklabels = [""] + list(Y)
    yticklabels = [""] + list(X)

    sns.heatmap(
        np.asarray(F, dtype=float),
        ax=ax,
        cmap=cmap,
        center=0,
        square=True,
        cbar=False,
        annot=annotate,
        fmt=".0f",
        xticklabels=xticklabels,
        yticklabels=yticklabels,
    )
    ax.set_title(title if title is not None else f"Score matrix (score = {result.score})")
    ax.set_xlabel("Y (columns)")
    ax.set_ylabel("X (rows)")
    ax.tick_params(top=True, bottom=False, labeltop=True, labelbottom=False)
    ax.xaxis.set_label_position("top")

    for tick, lab in zip(ax.get_xticklabels(), xticklabels):
        tick.set_rotation(0)
        tick.set_color(nt_color_map.get(lab, "black"))
        tick.set_fontweight("bold")
    for tick, lab in zip(ax.get_yticklabels(), yticklabels):
        tick.set_rotation(0)
        tick.set_va("center")
        tick.set_color(nt_color_map.get(lab, "black"))
        tick.set_fontweight("bold")

    # Path overlay
    for (i, j, move) in result.path:
        ax.plot(
            j + 0.5,
            i + 0.5,
            marker=marker_style,
            markersize=marker_size,
            markeredgecolor=PATH_MOVE_COLORS.get(move, "black"),
            markerfacecolor="none",
            alpha=0.9,
            markeredgewidth=marker_width,
        )

    fig.tight_layout()
    return fig


def check_image_format(path: Union[str, Path]) -> Path:
    """
    Raise OutputWriteFailure unless matplotlib can save to path's extension.

    A path without an extension uses matplotlib's default format.
    """
    path = Path(path)
    ext = path.suffix[1:].lower()
    if ext and ext not in FigureCanvasBase.get_supported_filetypes():
        raise OutputWriteFailure(path, f"unsupported image format '{ext}'")
    return path


def save_score_matrix_plot(
    result,
    X: str,
    Y: str,
    path: Union[str, Path],
    dpi: int = 150,
    **kwargs,
) -> Path:
    """Render plot_score_matrix to an image file and close the figure."""
    path = check_image_format(path)
    fig = plot_score_matrix(result, X, Y, **kwargs)
    try:
        fig.savefig(path, dpi=dpi)
    except (OSError, ValueError) as exc:
        raise OutputWriteFailure(path, getattr(exc, "strerror", None) or str(exc)) from exc
    finally:
        plt.close(fig)
    return path
