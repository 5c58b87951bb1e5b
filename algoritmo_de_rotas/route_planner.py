import logging
from typing import Iterable, List, Optional, Tuple

from algoritmo_de_rotas.dijkstra import dijkstra_driving, dijkstra_walking
from classes_de_elementos.availability_overlay import AvailabilityOverlay
from classes_de_elementos.city_graph import CityGraph
from classes_de_elementos.route_result import (
    ENVIRONMENTAL_ALTERNATIVES,
    ENVIRONMENTAL_NONE,
    ENVIRONMENTAL_OK,
    BestRouteResult,
    EnvironmentalCandidate,
    EnvironmentalRouteResult,
    RestrictedRouteResult,
)
from constantes.constantes import ENVIRONMENTAL_TOLERANCE

def best_route_with_alternative(graph: CityGraph, origin, destination) -> BestRouteResult:
    '''
    Calcula a rota mais rápida de carro e uma rota alternativa que não reusa
    nenhuma aresta da primeira (na mesma direção).

    Parâmetros
    ----------
    graph       : CityGraph
    origin      : id ou código da origem
    destination : id ou código do destino

    Retorno
    -------
    BestRouteResult : best/alternative (None quando não existem)

    Observações
    -----------
    A alternativa é heurística: exclui as arestas da melhor rota e roda o
    Dijkstra de novo. Não é um k-ésimo caminho mínimo no sentido formal.
    '''
    origin_id = graph.resolve_vertex(origin).id
    destination_id = graph.resolve_vertex(destination).id

    best = dijkstra_driving(graph, origin_id, destination_id)
    if best is None or not best.edges:
        return BestRouteResult(origin_id, destination_id, best, None)

    used_roads = AvailabilityOverlay.from_edges(best.edges)
    alternative = dijkstra_driving(graph, origin_id, destination_id, used_roads)
    logging.debug("Rota %d->%d: melhor=%s alternativa=%s", origin_id, destination_id,
                  best.cost, None if alternative is None else alternative.cost)
    return BestRouteResult(origin_id, destination_id, best, alternative)


def restricted_route(graph: CityGraph, origin, destination,
                     avoid_nodes: Optional[Iterable[int]] = None,
                     avoid_segments: Optional[Iterable[Tuple[int, int]]] = None,
                     include_node=None) -> RestrictedRouteResult:
    '''
    Rota de carro mais rápida evitando locais/segmentos e, opcionalmente,
    passando por um local obrigatório.

    Parâmetros
    ----------
    graph          : CityGraph
    origin         : id ou código da origem
    destination    : id ou código do destino
    avoid_nodes    : ids a evitar (ids inexistentes são ignorados)
    avoid_segments : pares (id, id) a evitar, só na direção informada
    include_node   : id ou código da parada obrigatória (opcional)

    Retorno
    -------
    RestrictedRouteResult : route=None quando algum trecho é inalcançável

    Observações
    -----------
    Com parada obrigatória são duas buscas independentes (origem→parada e
    parada→destino); a segunda só roda se a primeira encontrar caminho.
    '''
    origin_id = graph.resolve_vertex(origin).id
    destination_id = graph.resolve_vertex(destination).id
    stop_id = None if include_node is None else graph.resolve_vertex(include_node).id

    overlay = AvailabilityOverlay.from_avoid_lists(graph, avoid_nodes, avoid_segments)
    logging.debug("Restrições aplicadas: %r", overlay)

    if stop_id is None:
        route = dijkstra_driving(graph, origin_id, destination_id, overlay)
        return RestrictedRouteResult(origin_id, destination_id, route)

    first_half = dijkstra_driving(graph, origin_id, stop_id, overlay)
    if first_half is None:
        return RestrictedRouteResult(origin_id, destination_id, None, stop_id)

    second_half = dijkstra_driving(graph, stop_id, destination_id, overlay)
    if second_half is None:
        return RestrictedRouteResult(origin_id, destination_id, None, stop_id)

    return RestrictedRouteResult(origin_id, destination_id, first_half.joined_with(second_half), stop_id)


def _environmental_candidates(graph: CityGraph, origin_id: int, destination_id: int,
                              overlay: AvailabilityOverlay) -> List[EnvironmentalCandidate]:
    '''
    Para cada estacionamento (exceto origem e destino) calcula o trecho de
    carro origem→estacionamento e o trecho a pé estacionamento→destino.
    Estacionamentos sem algum dos trechos são descartados.
    '''
    candidates: List[EnvironmentalCandidate] = []
    for parking in graph.parking_vertices():
        if parking.id in (origin_id, destination_id):
            continue
        driving = dijkstra_driving(graph, origin_id, parking.id, overlay)
        if driving is None:
            continue
        walking = dijkstra_walking(graph, parking.id, destination_id, overlay)
        if walking is None:
            continue
        candidates.append(EnvironmentalCandidate(parking.id, driving, walking))
    return candidates


def environmental_route(graph: CityGraph, origin, destination, max_walk_time: float,
                        avoid_nodes: Optional[Iterable[int]] = None,
                        avoid_segments: Optional[Iterable[Tuple[int, int]]] = None) -> EnvironmentalRouteResult:
    '''
    Rota ambiental: dirigir até um estacionamento e caminhar até o destino.

    Parâmetros
    ----------
    graph          : CityGraph
    origin         : id ou código da origem
    destination    : id ou código do destino
    max_walk_time  : tempo máximo de caminhada (minutos)
    avoid_nodes    : ids a evitar nos dois trechos
    avoid_segments : pares (id, id) a evitar nos dois trechos

    Retorno
    -------
    EnvironmentalRouteResult

    Observações
    -----------
    1) Se há candidatos dentro do limite, escolhe o de menor tempo total
       (empate: maior caminhada, depois menor id de estacionamento).
    2) Senão, devolve os candidatos acima do limite cujo total fica a até
       ENVIRONMENTAL_TOLERANCE do melhor total, ordenados por total e
       caminhada.
    3) Sem nenhum candidato viável, status "none".
    '''
    if max_walk_time < 0:
        raise ValueError(f"Tempo máximo de caminhada inválido: {max_walk_time!r}")

    origin_id = graph.resolve_vertex(origin).id
    destination_id = graph.resolve_vertex(destination).id
    overlay = AvailabilityOverlay.from_avoid_lists(graph, avoid_nodes, avoid_segments)

    candidates = _environmental_candidates(graph, origin_id, destination_id, overlay)
    logging.debug("Rota ambiental %d->%d: %d estacionamentos viáveis",
                  origin_id, destination_id, len(candidates))

    if not candidates:
        return EnvironmentalRouteResult(origin_id, destination_id, max_walk_time, ENVIRONMENTAL_NONE)

    in_budget = [candidate for candidate in candidates if candidate.walk_time <= max_walk_time]
    if in_budget:
        best = min(in_budget, key=lambda c: (c.total_time, -c.walk_time, c.parking_id))
        return EnvironmentalRouteResult(origin_id, destination_id, max_walk_time, ENVIRONMENTAL_OK, best=best)

    ranked = sorted(candidates, key=lambda c: (c.total_time, c.walk_time, c.parking_id))
    best_total = ranked[0].total_time
    alternatives = [c for c in ranked if c.total_time <= best_total + ENVIRONMENTAL_TOLERANCE]
    return EnvironmentalRouteResult(origin_id, destination_id, max_walk_time,
                                    ENVIRONMENTAL_ALTERNATIVES, alternatives=alternatives)
