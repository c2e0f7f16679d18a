"""
dot.py — Graphviz (DOT) export of an alignment

The alignment is modelled as a networkx DiGraph with one node per
alignment column, chained left to right.  graph_to_pydot converts that
graph with networkx.nx_pydot, adds a legend cluster (category exemplars
and the match percentage) and groups columns into rows of ROW_WIDTH
nodes that share a rank.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Union

import networkx as nx
import pydot

from .default import ROW_WIDTH
from .errors import OutputWriteFailure
from .identity import GAP, MATCH, MISMATCH, classify_column

logger = logging.getLogger(__name__)


# =============================================================================
# STYLE
# =============================================================================

CATEGORY_COLORS: Dict[str, str] = {
    MATCH: "lightgreen",
    MISMATCH: "lightcoral",
    GAP: "lightblue",
}

LEGEND_NODES = [
    # (node id, label, category)
    ("LegendMatch", "Match (A|A)", MATCH),
    ("LegendMismatch", "Mismatch (A|T)", MISMATCH),
    ("LegendGap", "Gap (A|-)", GAP),
]

FONT_NAME = "Arial"
NODE_FONT_SIZE = 16
LEGEND_FONT_SIZE = 20


# =============================================================================
# GRAPH MODEL
# =============================================================================

def node_name(index: int) -> str:
    return f"Node{index}"


def column_rows(length: int, row_width: int = ROW_WIDTH) -> List[List[int]]:
    """
    Split column indices 0..length-1 into consecutive rows of row_width.

    The last row holds the remainder when length is not a multiple of
    row_width.
    """
    if row_width < 1:
        raise ValueError(f"row_width must be positive, got {row_width}")
    return [
        list(range(start, min(start + row_width, length)))
        for start in range(0, length, row_width)
    ]


def alignment_to_networkx(
    X_aln: str,
    Y_aln: str,
    row_width: int = ROW_WIDTH,
) -> nx.DiGraph:
    """
    Build the column graph of an alignment.

    Each node i carries ``label`` ("x|y"), ``category``, ``fillcolor``
    and ``row``; edges link column i-1 to column i.
    """
    if len(X_aln) != len(Y_aln):
        raise ValueError(
            f"aligned strings differ in length: {len(X_aln)} != {len(Y_aln)}"
        )
    if row_width < 1:
        raise ValueError(f"row_width must be positive, got {row_width}")
    graph = nx.DiGraph()
    graph.graph["row_width"] = row_width
    for i, (x, y) in enumerate(zip(X_aln, Y_aln)):
        category = classify_column(x, y)
        graph.add_node(
            i,
            label=f"{x}|{y}",
            category=category,
            fillcolor=CATEGORY_COLORS[category],
            row=i // row_width,
        )
        if i > 0:
            graph.add_edge(i - 1, i)
    return graph


# =============================================================================
# DOT RENDERING
# =============================================================================

def _legend_cluster(percentage: float) -> pydot.Cluster:
    legend = pydot.Cluster(
        "legend",
        label="Legend",
        fontsize=str(LEGEND_FONT_SIZE),
        fontname=FONT_NAME,
    )
    for name, label, category in LEGEND_NODES:
        legend.add_node(pydot.Node(
            name, label=label, fillcolor=CATEGORY_COLORS[category], style="filled",
        ))
    legend.add_node(pydot.Node(
        "Percentage", label=f"Match percentage: {percentage:.2f}%", shape="plaintext",
    ))
    return legend


def graph_to_pydot(graph: nx.DiGraph, percentage: float, name: str = "Alignment") -> pydot.Dot:
    """
    Convert a column graph from alignment_to_networkx to a pydot graph.

    Column i becomes node ``Node{i}``; the legend is a ``cluster_legend``
    subgraph and each row of columns a ``rank=same`` subgraph.
    """
    row_width = graph.graph.get("row_width", ROW_WIDTH)
    nodes = sorted(graph.nodes)

    render = nx.DiGraph(name=name)
    render.graph["graph"] = {"rankdir": "LR"}
    render.graph["node"] = {
        "shape": "box",
        "style": "filled",
        "fontsize": str(NODE_FONT_SIZE),
        "fontname": FONT_NAME,
    }
    for i in nodes:
        attrs = graph.nodes[i]
        render.add_node(node_name(i), label=attrs["label"], fillcolor=attrs["fillcolor"])
    render.add_edges_from((node_name(u), node_name(v)) for u, v in sorted(graph.edges))

    dot = nx.nx_pydot.to_pydot(render)
    dot.add_subgraph(_legend_cluster(percentage))
    for k, row in enumerate(column_rows(len(nodes), row_width)):
        rank = pydot.Subgraph(f"row{k}", rank="same")
        for i in row:
            rank.add_node(pydot.Node(node_name(i)))
        dot.add_subgraph(rank)
    return dot


def alignment_to_pydot(
    X_aln: str,
    Y_aln: str,
    percentage: float,
    row_width: int = ROW_WIDTH,
) -> pydot.Dot:
    graph = alignment_to_networkx(X_aln, Y_aln, row_width=row_width)
    return graph_to_pydot(graph, percentage)


def alignment_to_dot(
    X_aln: str,
    Y_aln: str,
    percentage: float,
    row_width: int = ROW_WIDTH,
) -> str:
    """
    DOT description of an alignment.

    Parameters
    ----------
    X_aln, Y_aln : str
        Equal-length aligned strings.
    percentage : float
        Match percentage shown in the legend (two decimals).
    row_width : int
        Number of columns per same-rank row.
    """
    return alignment_to_pydot(X_aln, Y_aln, percentage, row_width=row_width).to_string()


def write_dot(
    path: Union[str, Path],
    X_aln: str,
    Y_aln: str,
    percentage: float,
    row_width: int = ROW_WIDTH,
) -> Path:
    """Write alignment_to_dot output to path, replacing any existing file."""
    dot = alignment_to_pydot(X_aln, Y_aln, percentage, row_width=row_width)
    path = Path(path)
    try:
        dot.write(str(path), format="raw", encoding="utf-8")
    except OSError as exc:
        raise OutputWriteFailure(path, exc.strerror or str(exc)) from exc
    logger.debug("wrote %d alignment columns to %s", len(X_aln), path)
    return path
