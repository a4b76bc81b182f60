"""Graph problems: star centres, reachability, trust, cloning, knight moves."""

from __future__ import annotations

from collections import Counter, defaultdict, deque
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

_KNIGHT_MOVES = (
    (2, 1),
    (1, 2),
    (-2, -1),
    (-1, -2),
    (-1, 2),
    (-2, 1),
    (2, -1),
    (1, -2),
)


@dataclass(eq=False)
class GraphNode:
    """An undirected graph node; nodes compare by identity."""

    val: int = 0
    neighbors: List["GraphNode"] = field(default_factory=list, repr=False)


def find_center(edges: Sequence[Sequence[int]]) -> int:
    """Centre of a star graph: the vertex shared by the first two edges."""
    first, second = edges[0], edges[1]
    return first[0] if first[0] in (second[0], second[1]) else first[1]


def valid_path(
    n: int, edges: Sequence[Sequence[int]], source: int, destination: int
) -> bool:
    """Whether destination is adjacent to a vertex reachable from source.

    An empty edge list counts as a path.
    """
    if not edges:
        return True
    adjacency: defaultdict[int, List[int]] = defaultdict(list)
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
    seen = {source}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for neighbour in adjacency[node]:
            if neighbour == destination:
                return True
            if neighbour not in seen:
                seen.add(neighbour)
                queue.append(neighbour)
    return False


def find_judge(n: int, trust: Sequence[Sequence[int]]) -> int:
    """The person trusted by everyone else who trusts nobody, or -1."""
    if not trust and n == 1:
        return 1
    trusts_others = Counter(truster for truster, _ in trust)
    trusted_by = Counter(trustee for _, trustee in trust)
    for person in range(n + 1):
        if trusts_others[person] == 0 and trusted_by[person] == n - 1:
            return person
    return -1


def clone_graph(node: Optional[GraphNode]) -> Optional[GraphNode]:
    """Deep copy of the connected graph containing node."""
    if node is None:
        return None
    clones: Dict[int, GraphNode] = {id(node): GraphNode(node.val)}
    stack = [node]
    while stack:
        current = stack.pop()
        clone = clones[id(current)]
        for neighbour in current.neighbors:
            if id(neighbour) not in clones:
                clones[id(neighbour)] = GraphNode(neighbour.val)
                stack.append(neighbour)
            clone.neighbors.append(clones[id(neighbour)])
    return clones[id(node)]


def min_knight_steps(
    knight_pos: Sequence[int], target_pos: Sequence[int], n: int
) -> int:
    """Fewest knight moves between two squares of an n-by-n board (1-based), or -1."""
    start = (knight_pos[0], knight_pos[1])
    target = (target_pos[0], target_pos[1])
    seen = {start}
    frontier = [start]
    steps = 0
    while frontier:
        if target in frontier:
            return steps
        following = []
        for a, b in frontier:
            for da, db in _KNIGHT_MOVES:
                cell = (a + da, b + db)
                if 0 < cell[0] <= n and 0 < cell[1] <= n and cell not in seen:
                    seen.add(cell)
                    following.append(cell)
        frontier = following
        steps += 1
    return -1