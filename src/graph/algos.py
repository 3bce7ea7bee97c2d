"""Graph algorithms over module adjacency maps.

Adjacency maps are ``dict[str, list[str]]`` keyed by tracked module
identifiers. Targets that are not keys are unresolved dependencies and are
treated as dead ends.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from graph.models import DependencyEdge


def build_adjacency(
    modules: Iterable[str],
    edges: Iterable[DependencyEdge],
) -> dict[str, list[str]]:
    """Build an adjacency map from module identifiers and dependency edges.

    Every module gets an entry, in the given order. Edge targets keep edge
    order and multiplicity.
    """
    adjacency: dict[str, list[str]] = {module: [] for module in modules}
    for edge in edges:
        adjacency.setdefault(edge.from_module, []).append(edge.to_module)
    return adjacency


def has_cycle(adjacency: dict[str, list[str]]) -> bool:
    """Return True if the directed graph contains at least one cycle.

    Depth-first search with an explicit stack, stopping at the first back
    edge. Roots are tried in adjacency order.
    """
    visited: set[str] = set()
    on_stack: set[str] = set()

    for root in adjacency:
        if root in visited:
            continue

        visited.add(root)
        on_stack.add(root)
        stack: list[tuple[str, Iterator[str]]] = [(root, iter(adjacency[root]))]

        while stack:
            node, neighbors = stack[-1]
            for neighbor in neighbors:
                if neighbor not in visited:
                    visited.add(neighbor)
                    on_stack.add(neighbor)
                    stack.append((neighbor, iter(adjacency.get(neighbor, ()))))
                    break
                if neighbor in on_stack:
                    return True
            else:
                on_stack.discard(node)
                stack.pop()

    return False


class _TarjanState:
    """Mutable state container for Tarjan's SCC algorithm."""

    def __init__(self) -> None:
        self.index = 0
        self.indices: dict[str, int] = {}
        self.low_link: dict[str, int] = {}
        self.on_stack: set[str] = set()
        self.stack: list[str] = []
        self.sccs: list[list[str]] = []


def _extract_scc(state: _TarjanState, root: str) -> list[str]:
    """Pop one strongly connected component off the stack."""
    scc: list[str] = []
    while state.stack:
        w = state.stack.pop()
        state.on_stack.remove(w)
        scc.append(w)
        if w == root:
            break
    if root not in scc:
        msg = (
            f"Tarjan algorithm invariant violated: root node {root!r} "
            "not found in stack during SCC extraction."
        )
        raise RuntimeError(msg)
    return scc


def _visit(node: str, state: _TarjanState) -> None:
    state.indices[node] = state.index
    state.low_link[node] = state.index
    state.index += 1
    state.stack.append(node)
    state.on_stack.add(node)


def _strongconnect(
    root: str, adjacency: dict[str, list[str]], state: _TarjanState
) -> None:
    """Run Tarjan's search from ``root`` using an explicit work stack."""
    _visit(root, state)
    work: list[tuple[str, Iterator[str]]] = [(root, iter(adjacency.get(root, ())))]

    while work:
        node, neighbors = work[-1]
        for neighbor in neighbors:
            if neighbor not in adjacency:
                continue
            if neighbor not in state.indices:
                _visit(neighbor, state)
                work.append((neighbor, iter(adjacency.get(neighbor, ()))))
                break
            if neighbor in state.on_stack:
                state.low_link[node] = min(
                    state.low_link[node], state.indices[neighbor]
                )
        else:
            work.pop()
            if work:
                parent = work[-1][0]
                state.low_link[parent] = min(
                    state.low_link[parent], state.low_link[node]
                )
            if state.low_link[node] == state.indices[node]:
                scc = _extract_scc(state, node)
                if len(scc) > 1 or node in adjacency.get(node, ()):
                    state.sccs.append(scc)


def find_cycles(adjacency: dict[str, list[str]]) -> list[list[str]]:
    """Find every strongly connected component that forms a cycle.

    Single-node components are reported only when the node imports itself.
    Components and their members are sorted for stable output.

    Args:
        adjacency: Adjacency map of tracked modules

    Returns:
        List of cycles, where each cycle is a sorted list of module identifiers
    """
    state = _TarjanState()

    for node in adjacency:
        if node not in state.indices:
            _strongconnect(node, adjacency, state)

    return sorted(sorted(scc) for scc in state.sccs)


def compute_depths(
    adjacency: dict[str, list[str]],
) -> tuple[dict[str, int], list[str]]:
    """Compute the longest chain of tracked dependencies below each module.

    Modules without tracked targets have depth 0. Modules that lie on a cycle,
    or depend on one, have no defined depth and are returned separately.

    Returns:
        Tuple of (depth per module, unresolved modules in adjacency order)
    """
    remaining: dict[str, int] = {}
    dependents: dict[str, list[str]] = {node: [] for node in adjacency}
    for node, targets in adjacency.items():
        tracked = [target for target in targets if target in adjacency]
        remaining[node] = len(tracked)
        for target in tracked:
            dependents[target].append(node)

    depths: dict[str, int] = {}
    ready = deque(node for node, count in remaining.items() if count == 0)
    for node in ready:
        depths[node] = 0

    while ready:
        node = ready.popleft()
        for dependent in dependents[node]:
            depths[dependent] = max(depths.get(dependent, 0), depths[node] + 1)
            remaining[dependent] -= 1
            if remaining[dependent] == 0:
                ready.append(dependent)

    unresolved = [node for node in adjacency if remaining[node] > 0]
    for node in unresolved:
        depths.pop(node, None)
    resolved = {node: depths[node] for node in adjacency if node in depths}
    return resolved, unresolved


__all__ = [
    "build_adjacency",
    "compute_depths",
    "find_cycles",
    "has_cycle",
]
