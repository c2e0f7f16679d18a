"""Tests for the Graphviz export of alignments."""

import re

import pydot
import pytest

from nwalign.dot import (
    CATEGORY_COLORS,
    alignment_to_dot,
    alignment_to_networkx,
    alignment_to_pydot,
    column_rows,
    write_dot,
)
from nwalign.errors import OutputWriteFailure


def _rank_groups(dot):
    return [[node.get_name() for node in sub.get_node_list()]
            for sub in dot.get_subgraph_list() if sub.get("rank") == "same"]


def _node_attr(graph, name, attr):
    (node,) = graph.get_node(name)
    return node.get(attr)


class TestColumnGraph:

    def test_nodes_and_edges(self):
        graph = alignment_to_networkx("AC-T", "AGGT")
        assert graph.number_of_nodes() == 4
        assert list(graph.edges) == [(0, 1), (1, 2), (2, 3)]
        assert [graph.nodes[i]["category"] for i in graph] == ["match", "mismatch", "gap", "match"]
        assert graph.nodes[2]["label"] == "-|G"
        assert graph.nodes[2]["fillcolor"] == CATEGORY_COLORS["gap"]

    def test_row_attribute(self):
        graph = alignment_to_networkx("A" * 23, "A" * 23, row_width=10)
        assert graph.nodes[9]["row"] == 0
        assert graph.nodes[10]["row"] == 1
        assert graph.nodes[22]["row"] == 2

    def test_length_mismatch(self):
        with pytest.raises(ValueError):
            alignment_to_networkx("AC", "A")

    @pytest.mark.parametrize("length,width,sizes", [
        (0, 10, []),
        (7, 10, [7]),
        (10, 10, [10]),
        (25, 10, [10, 10, 5]),
        (6, 4, [4, 2]),
    ])
    def test_column_rows(self, length, width, sizes):
        rows = column_rows(length, width)
        assert [len(r) for r in rows] == sizes
        assert [i for r in rows for i in r] == list(range(length))

    def test_bad_row_width(self):
        with pytest.raises(ValueError):
            column_rows(5, 0)


class TestDotGraph:

    def test_header(self):
        dot = alignment_to_pydot("AC", "AG", 50.0)
        assert dot.get_type() == "digraph"
        assert dot.get("rankdir") == "LR"
        text = alignment_to_dot("AC", "AG", 50.0)
        assert re.search(r"digraph\s+\"?Alignment\"?\s*\{", text)
        assert text.rstrip().endswith("}")

    def test_legend(self):
        dot = alignment_to_pydot("AC", "AG", 50.0)
        (legend,) = dot.get_subgraph("cluster_legend")
        assert legend.get("label") == "Legend"
        assert _node_attr(legend, "LegendMatch", "label") == "Match (A|A)"
        assert _node_attr(legend, "LegendMatch", "fillcolor") == "lightgreen"
        assert _node_attr(legend, "LegendMismatch", "fillcolor") == "lightcoral"
        assert _node_attr(legend, "LegendGap", "label") == "Gap (A|-)"
        assert _node_attr(legend, "LegendGap", "fillcolor") == "lightblue"
        assert _node_attr(legend, "Percentage", "label") == "Match percentage: 50.00%"
        assert _node_attr(legend, "Percentage", "shape") == "plaintext"

    def test_percentage_two_decimals(self):
        text = alignment_to_dot("ACG", "ACT", 200 / 3)
        assert "Match percentage: 66.67%" in text

    def test_column_nodes(self):
        dot = alignment_to_pydot("AC-", "AGT", 33.33)
        assert _node_attr(dot, "Node0", "label") == "A|A"
        assert _node_attr(dot, "Node0", "fillcolor") == "lightgreen"
        assert _node_attr(dot, "Node1", "fillcolor") == "lightcoral"
        assert _node_attr(dot, "Node2", "label") == "-|T"
        assert _node_attr(dot, "Node2", "fillcolor") == "lightblue"
        edges = [(e.get_source(), e.get_destination()) for e in dot.get_edge_list()]
        assert edges == [("Node0", "Node1"), ("Node1", "Node2")]

    def test_row_grouping(self):
        X = "ACGT" * 6 + "A"  # 25 columns
        dot = alignment_to_pydot(X, X, 100.0)
        groups = _rank_groups(dot)
        assert [len(g) for g in groups] == [10, 10, 5]
        assert groups[2] == [f"Node{i}" for i in range(20, 25)]
        assert len(dot.get_edge_list()) == 24

    def test_exact_multiple_has_no_extra_row(self):
        X = "ACGTACGTAC" * 2
        groups = _rank_groups(alignment_to_pydot(X, X, 100.0))
        assert [len(g) for g in groups] == [10, 10]

    def test_empty_alignment(self):
        dot = alignment_to_pydot("", "", 0.0)
        assert "Match percentage: 0.00%" in dot.to_string()
        assert dot.get_node("Node0") == []
        assert _rank_groups(dot) == []

    def test_text_parses_back(self):
        text = alignment_to_dot("ACGT", "A-GA", 50.0, row_width=3)
        (parsed,) = pydot.graph_from_dot_data(text)
        assert len(parsed.get_edge_list()) == 3
        names = {sub.get_name() for sub in parsed.get_subgraph_list()}
        assert "cluster_legend" in names
        assert len(re.findall(r"rank\s*=\s*\"?same", text)) == 2


class TestWriteDot:

    def test_write(self, tmp_path):
        out = write_dot(tmp_path / "aln.dot", "AC", "AG", 50.0)
        assert out.read_text() == alignment_to_dot("AC", "AG", 50.0)

    def test_overwrites(self, tmp_path):
        path = tmp_path / "aln.dot"
        path.write_text("stale")
        write_dot(path, "A", "A", 100.0)
        assert "stale" not in path.read_text()

    def test_unwritable_path(self, tmp_path):
        with pytest.raises(OutputWriteFailure) as excinfo:
            write_dot(tmp_path / "missing_dir" / "aln.dot", "A", "A", 100.0)
        assert "missing_dir" in str(excinfo.value)
