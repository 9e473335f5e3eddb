"""Tests for the arc specification graph builder."""

import pytest

from junctions.adapters.graph import ArcSpecGraphBuilder
from junctions.config import GraphConfig
from junctions.domain.errors import MalformedArcError, NonPositiveWeightError
from junctions.domain.models import Arc


MALFORMED_TOKENS = [
    "A2",  # missing node
    "A",  # missing weight
    "Zk5",  # labels outside the alphabet
    "AB",  # no weight
    "AB5x",  # trailing garbage
    "AB-5",  # sign is not part of the shape
    "AB\u0663",  # only ASCII digits form a weight
    "",  # empty token
]


class TestArcSpecGraphBuilder:
    """Test suite for ArcSpecGraphBuilder."""

    @pytest.fixture
    def builder(self):
        return ArcSpecGraphBuilder(GraphConfig())

    def test_well_formed_arc(self, builder):
        graph = builder.build_directed_graph("AB2")

        assert graph.edge_with_weight_exists("A", "B", 2)
        assert sorted(graph.labels()) == ["A", "B"]

    @pytest.mark.parametrize("token", MALFORMED_TOKENS)
    def test_malformed_arc_raises(self, builder, token):
        with pytest.raises(MalformedArcError) as excinfo:
            builder.build_directed_graph(f"AB5, {token}")

        assert excinfo.value.token == token

    def test_tokens_are_trimmed(self, builder):
        graph = builder.build_directed_graph("  AB5 ,BC4,\tCD12  ")

        assert graph.edge_with_weight_exists("A", "B", 5)
        assert graph.edge_with_weight_exists("B", "C", 4)
        assert graph.edge_with_weight_exists("C", "D", 12)

    def test_zero_weight_matches_shape_but_is_rejected(self, builder):
        assert builder.parse_arcs("AB0") == [Arc("A", "B", 0)]

        with pytest.raises(NonPositiveWeightError):
            builder.build_directed_graph("AB0")

    def test_repeated_arc_overwrites_weight(self, builder):
        graph = builder.build_directed_graph("AB5, AB7")

        assert graph.edge_with_weight_exists("A", "B", 7)

    def test_parse_arcs_keeps_input_order(self, builder):
        arcs = builder.parse_arcs("CD8, AB5")

        assert arcs == [Arc("C", "D", 8), Arc("A", "B", 5)]
        assert [str(arc) for arc in arcs] == ["CD8", "AB5"]

    def test_build_from_arcs(self, builder):
        graph = builder.build_from_arcs([Arc("A", "B", 1), Arc("B", "A", 2)])

        assert graph.route_distance(["A", "B", "A"]) == 3

    def test_custom_alphabet_and_separator(self):
        builder = ArcSpecGraphBuilder(GraphConfig(node_alphabet="XYZ", arc_separator=";"))

        graph = builder.build_directed_graph("XY3; YZ4")

        assert graph.route_distance(["X", "Y", "Z"]) == 7
        with pytest.raises(MalformedArcError):
            builder.build_directed_graph("AB5")
