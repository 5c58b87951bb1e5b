import heapq
from typing import Dict, List, Optional

from classes_de_elementos.availability_overlay import NO_RESTRICTIONS, AvailabilityOverlay
from classes_de_elementos.city_graph import CityGraph
from classes_de_elementos.edge import Edge
from classes_de_elementos.errors import VertexNotFoundError
from classes_de_elementos.route_result import PathResult
from constantes.constantes import DRIVING, INF, TRAVEL_MODES, WALKING
from funcoes_utilitarias._weight_for_mode import _weight_for_mode

def _reconstruct_path(graph: CityGraph, predecessor: Dict[int, int],
                      origin_id: int, destination_id: int) -> List[Edge]:
    '''
    Reconstrói a lista de arestas do caminho a partir de um dicionário de
    predecessores {nó: handle_da_aresta_usada}.
    '''
    path_edges: List[Edge] = []
    node_cursor = destination_id
    while node_cursor != origin_id:
        edge = graph.edge(predecessor[node_cursor])
        path_edges.append(edge)
        node_cursor = edge.origin
    path_edges.reverse()
    return path_edges


def dijkstra(graph: CityGraph, origin_id: int, destination_id: int,
             travel_mode: str, overlay: Optional[AvailabilityOverlay] = None) -> Optional[PathResult]:
    '''
    Executa Dijkstra entre dois vértices usando o peso do modo informado.

    Parâmetros
    ----------
    graph          : CityGraph
    origin_id      : id do vértice de origem
    destination_id : id do vértice de destino
    travel_mode    : 'driving' | 'walking'
    overlay        : AvailabilityOverlay opcional (vértices/arestas excluídos)

    Retorno
    -------
    PathResult | None : caminho e custo; None se o destino for inalcançável

    Observações
    -----------
    - Ignora arestas com peso INF no modo, arestas indisponíveis e arestas cujo
      destino está indisponível (flag do grafo ou overlay).
    - Estado da busca (distância, predecessor, visitados) fica em dicionários
      locais; o grafo não é alterado.
    - Origem igual ao destino devolve caminho vazio com custo 0.
    - Fila de prioridade sem decrease-key: entradas obsoletas são descartadas
      ao sair da fila.
    '''
    if graph.find_vertex(origin_id) is None:
        raise VertexNotFoundError(origin_id)
    if graph.find_vertex(destination_id) is None:
        raise VertexNotFoundError(destination_id)
    if travel_mode.lower() not in TRAVEL_MODES:
        raise ValueError(f"Modo de viagem inválido: {travel_mode!r}. Use 'driving' ou 'walking'.")

    overlay = overlay or NO_RESTRICTIONS

    distance_from_origin: Dict[int, float] = {origin_id: 0.0}
    predecessor: Dict[int, int] = {}
    visited: set[int] = set()
    priority_queue: list[tuple[float, int]] = [(0.0, origin_id)]

    while priority_queue:
        current_distance, current_node_id = heapq.heappop(priority_queue)
        if current_node_id in visited:
            continue
        visited.add(current_node_id)

        if current_node_id == destination_id:
            break

        for edge in graph.outgoing_edges(current_node_id):
            edge_weight = _weight_for_mode(travel_mode, edge)
            if edge_weight == INF or not overlay.allows_edge(edge):
                continue
            neighbor = graph.vertices[edge.dest]
            if not overlay.allows_vertex(neighbor):
                continue

            new_distance = current_distance + edge_weight
            if new_distance < distance_from_origin.get(neighbor.id, INF):
                distance_from_origin[neighbor.id] = new_distance
                predecessor[neighbor.id] = edge.handle
                heapq.heappush(priority_queue, (new_distance, neighbor.id))

    if origin_id == destination_id:
        return PathResult(origin_id, destination_id, [], 0.0)
    if destination_id not in predecessor:
        return None

    path_edges = _reconstruct_path(graph, predecessor, origin_id, destination_id)
    return PathResult(origin_id, destination_id, path_edges, distance_from_origin[destination_id])


def dijkstra_driving(graph: CityGraph, origin_id: int, destination_id: int,
                     overlay: Optional[AvailabilityOverlay] = None) -> Optional[PathResult]:
    return dijkstra(graph, origin_id, destination_id, DRIVING, overlay)


def dijkstra_walking(graph: CityGraph, origin_id: int, destination_id: int,
                     overlay: Optional[AvailabilityOverlay] = None) -> Optional[PathResult]:
    return dijkstra(graph, origin_id, destination_id, WALKING, overlay)
