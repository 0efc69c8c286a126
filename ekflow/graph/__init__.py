"""Graph interoperability helpers.

Converts dense capacity matrices to and from NetworkX directed graphs.
"""

from ekflow.graph.convert import from_digraph, to_digraph

__all__ = ["from_digraph", "to_digraph"]
