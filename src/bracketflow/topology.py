"""
Feed topology of a bracket using networkx.

Uses networkx for:
- Representing which cell feeds which (a forest of in-trees)
- Walking a cell's path to the final column

Cell ``(c, r)`` feeds ``(c + 1, r // 2)`` whenever that cell exists.
"""

from typing import List

import networkx as nx

from .model import BracketModel
from .models import GridPosition, OutOfRangeError


def feed_graph(model: BracketModel) -> nx.DiGraph:
    """
    Build the directed feed graph of a model.

    Args:
        model: Any bracket model.

    Returns:
        DiGraph whose nodes are GridPositions (with a ``value`` attribute)
        and whose edges point from a cell to the cell it feeds.
    """
    graph = nx.DiGraph()
    columns = model.column_count()

    for column in range(columns):
        for row in range(model.row_count(column)):
            graph.add_node(
                GridPosition(column, row), value=model.value_at(column, row)
            )

    for column in range(columns - 1):
        next_rows = model.row_count(column + 1)
        for row in range(model.row_count(column)):
            if row // 2 < next_rows:
                position = GridPosition(column, row)
                graph.add_edge(position, position.next_slot())

    return graph


def is_elimination(model: BracketModel) -> bool:
    """Whether every column holds half the rows of the previous one, rounded up."""
    columns = model.column_count()
    if columns == 0:
        return False
    for column in range(1, columns):
        previous = model.row_count(column - 1)
        if model.row_count(column) != (previous + 1) // 2:
            return False
    return True


def path_to_final(model: BracketModel, column: int, row: int) -> List[GridPosition]:
    """
    Slots a cell advances through, starting with the cell itself.

    Raises:
        OutOfRangeError: If the cell is not part of the model.
    """
    if column < 0 or row < 0:
        raise OutOfRangeError(f"Cell ({column}, {row}) has a negative index")
    start = GridPosition(column, row)
    graph = feed_graph(model)
    if start not in graph:
        raise OutOfRangeError(f"Cell ({column}, {row}) is not in the model")

    # every node has out-degree <= 1, so the dfs order is the path
    return list(nx.dfs_preorder_nodes(graph, start))
