import argparse
from src.village.graph import RoadGraph
from src.village.routing import find_route

def main():
    parser = argparse.ArgumentParser(description="Mostrar el pueblo y una ruta más corta.")
    parser.add_argument("--from", dest="start", default="Post Office")
    parser.add_argument("--to", dest="goal", default="Daria's House")
    args = parser.parse_args()

    graph = RoadGraph.default()
    places = graph.places()
    edges = list(graph.edges())
    print(f"Lugares: {len(places)}  Caminos: {len(edges)}")
    route = find_route(graph, args.start, args.goal)
    print(f"Ruta {args.start} -> {args.goal}: {' → '.join(route)}  ({len(route)} pasos)")

if __name__ == "__main__":
    main()
