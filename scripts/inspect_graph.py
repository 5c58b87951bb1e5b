import sys

import matplotlib.pyplot as plt
import networkx as nx

from algoritmo_de_rotas.dijkstra import dijkstra_driving
from classes_de_elementos.city_graph import CityGraph

# Uso: python -m scripts.inspect_graph <locations_csv> <distances_csv> [<origem> <destino>]
if __name__ == "__main__":
    graph = CityGraph.load_graph(sys.argv[1], sys.argv[2])
    G = graph.to_networkx()

    print(f"Nós: {G.number_of_nodes()}, Arestas: {G.number_of_edges()}")

    highlighted = []
    if len(sys.argv) >= 5:
        origin = graph.resolve_vertex(sys.argv[3]).id
        destination = graph.resolve_vertex(sys.argv[4]).id
        best = dijkstra_driving(graph, origin, destination)
        if best is not None:
            highlighted = [(e.origin, e.dest) for e in best.edges]
            print(f"Melhor rota de carro: {best.vertex_ids()} ({best.cost} min)")

    pos = nx.spring_layout(G, seed=42)
    labels = {n: G.nodes[n]["code"] or str(n) for n in G.nodes()}
    colors = ["tab:green" if G.nodes[n]["parking"] else "tab:gray" for n in G.nodes()]
    plt.figure(figsize=(10, 10))
    nx.draw(G, pos, labels=labels, node_color=colors, node_size=300, edge_color="lightgray", arrowsize=5, font_size=7)
    if highlighted:
        nx.draw_networkx_edges(G, pos, edgelist=highlighted, edge_color="tab:red", width=2.5)
    plt.show()
