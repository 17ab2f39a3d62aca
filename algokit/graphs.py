"""Shortest paths on weighted directed graphs."""

from __future__ import annotations

import heapq
from collections import defaultdict
from collections.abc import Iterable, Sequence


def network_delay_time(times: Iterable[Sequence[int]], n: int, k: int) -> int:
    """Time for a signal from node ``k`` to reach all nodes ``1..n``, or -1.

    ``times`` holds directed edges ``(source, target, delay)``.
    """
    edges: defaultdict[int, list[tuple[int, int]]] = defaultdict(list)
    for source, target, delay in times:
        edges[source].append((target, delay))

    distance = {k: 0}
    queue = [(0, k)]
    while queue:
        dist, node = heapq.heappop(queue)
        if dist > distance[node]:
            continue
        for neighbour, delay in edges[node]:
            candidate = dist + delay
            if candidate < distance.get(neighbour, candidate + 1):
                distance[neighbour] = candidate
                heapq.heappush(queue, (candidate, neighbour))

    nodes = range(1, n + 1)
    if any(node not in distance for node in nodes):
        return -1
    return max(distance[node] for node in nodes)