"""
structures/
-----------
Input value types and their random factories.  Public API:

    from structures import Graph, create_graph
    from structures import create_grid, default_endpoints
    from structures import generate_random_array

Every factory takes an explicit `rng` (random.Random) or a `seed`;
nothing here touches the module-global random state.
"""

from structures.array import generate_random_array
from structures.graph import Graph, create_graph
from structures.grid  import (
    create_grid, default_endpoints, is_open, path_cost, shape
)

__all__ = [
    "generate_random_array",
    "Graph",       "create_graph",
    "create_grid", "default_endpoints", "is_open", "path_cost", "shape",
]
