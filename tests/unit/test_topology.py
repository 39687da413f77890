"""Unit tests for the topology module."""

import networkx as nx
import pytest

from bracketflow.model import DefaultBracketModel
from bracketflow.models import GridPosition, OutOfRangeError
from bracketflow.topology import feed_graph, is_elimination, path_to_final


class TestFeedGraph:
    """Tests for feed_graph."""

    def test_elimination_graph(self, elimination_model):
        graph = feed_graph(elimination_model)

        assert isinstance(graph, nx.DiGraph)
        assert graph.number_of_nodes() == 7
        assert graph.number_of_edges() == 6
        assert graph.has_edge(GridPosition(0, 3), GridPosition(1, 1))
        assert graph.has_edge(GridPosition(1, 0), GridPosition(2, 0))

    def test_is_a_tree_into_the_final(self, elimination_model):
        graph = feed_graph(elimination_model)
        assert nx.is_arborescence(graph.reverse())

    def test_node_values(self, elimination_model):
        graph = feed_graph(elimination_model)
        assert graph.nodes[GridPosition(0, 1)]["value"] == "Benfica"
        assert graph.nodes[GridPosition(2, 0)]["value"] is None

    def test_grid_edges(self, grid_model):
        assert feed_graph(grid_model).number_of_edges() == 8

    def test_missing_targets_have_no_edge(self):
        model = DefaultBracketModel(2)
        for row, value in enumerate("abc"):
            model.set_value_at(value, 0, row)
        model.set_value_at("d", 1, 0)

        graph = feed_graph(model)

        assert graph.out_degree(GridPosition(0, 2)) == 0
        assert graph.has_edge(GridPosition(0, 1), GridPosition(1, 0))

    def test_empty_model(self):
        assert feed_graph(DefaultBracketModel(0)).number_of_nodes() == 0


class TestIsElimination:
    """Tests for is_elimination."""

    def test_power_of_two(self, elimination_model):
        assert is_elimination(elimination_model)

    def test_rounds_up(self):
        model = DefaultBracketModel(3)
        for row in range(3):
            model.set_value_at(row, 0, row)
        for row in range(2):
            model.set_value_at(row, 1, row)
        model.set_value_at(0, 2, 0)
        assert is_elimination(model)

    def test_uneven_factory(self):
        assert is_elimination(DefaultBracketModel.elimination(6))

    def test_grid_is_not(self, grid_model):
        assert not is_elimination(grid_model)

    def test_empty(self):
        assert not is_elimination(DefaultBracketModel(0))


class TestPathToFinal:
    """Tests for path_to_final."""

    def test_from_first_round(self, elimination_model):
        assert path_to_final(elimination_model, 0, 3) == [
            GridPosition(0, 3),
            GridPosition(1, 1),
            GridPosition(2, 0),
        ]

    def test_from_final(self, elimination_model):
        assert path_to_final(elimination_model, 2, 0) == [GridPosition(2, 0)]

    @pytest.mark.parametrize("column,row", [(0, 4), (3, 0), (-1, 0)])
    def test_out_of_range(self, elimination_model, column, row):
        with pytest.raises(OutOfRangeError):
            path_to_final(elimination_model, column, row)
