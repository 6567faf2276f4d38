from typing import Dict, List
from collections import deque
from .graph import RoadGraph, Place

Route = List[Place]  # lugares a recorrer, sin incluir el origen


class NoRouteError(RuntimeError):
    """El BFS agotó la frontera sin llegar al destino: el grafo no es conexo."""

    def __init__(self, start: Place, goal: Place):
        super().__init__(f"No hay ruta de {start!r} a {goal!r}")
        self.start = start
        self.goal = goal


def find_route(graph: RoadGraph, start: Place, goal: Place) -> Route:
    """
    Ruta más corta (BFS) de start a goal. Entre rutas igual de cortas gana la
    que sigue al vecino listado primero en cada bifurcación.
    """
    if start == goal:
        return []
    work = deque([(start, [])])
    visited = {start}
    while work:
        at, route = work.popleft()
        for place in graph.neighbors(at):
            if place == goal:
                return route + [place]
            if place not in visited:
                visited.add(place)
                work.append((place, route + [place]))
    raise NoRouteError(start, goal)


def route_length(graph: RoadGraph, start: Place, goal: Place) -> int:
    """Número de caminos recorridos entre start y goal."""
    return len(find_route(graph, start, goal))


def all_pairs_route_lengths(graph: RoadGraph) -> Dict[Place, Dict[Place, int]]:
    """
    Distancias en caminos por BFS desde cada lugar. Los lugares inalcanzables
    no aparecen en el diccionario interno.
    """
    distances: Dict[Place, Dict[Place, int]] = {}
    for s in graph.places():
        dist = {s: 0}
        q = deque([s])
        while q:
            u = q.popleft()
            for v in graph.neighbors(u):
                if v not in dist:
                    dist[v] = dist[u] + 1
                    q.append(v)
        distances[s] = dist
    return distances
