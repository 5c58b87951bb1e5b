import logging
from typing import List

from algoritmo_de_rotas.route_planner import best_route_with_alternative, environmental_route, restricted_route
from classes_de_elementos.batch_request import BatchRequest
from classes_de_elementos.city_graph import CityGraph
from funcoes_utilitarias.parse_batch_input_file import parse_batch_input_file
from funcoes_utilitarias.print_route_report import (
    format_best_route,
    format_environmental_route,
    format_restricted_route,
    print_route_report,
)

def run_batch_request(graph: CityGraph, request: BatchRequest) -> List[str]:
    '''
    Despacha um pedido de lote para o cálculo correspondente:
    - driving sem restrições  → melhor rota + alternativa
    - driving com restrições  → rota restrita
    - driving-walking         → rota ambiental

    Retorno
    -------
    list[str] : linhas do relatório
    '''
    if request.is_environmental:
        result = environmental_route(graph, request.source, request.destination, request.max_walk_time,
                                     request.avoid_nodes, request.avoid_segments)
        return format_environmental_route(result)
    if request.has_restrictions:
        result = restricted_route(graph, request.source, request.destination,
                                  request.avoid_nodes, request.avoid_segments, request.include_node)
        return format_restricted_route(result)
    return format_best_route(best_route_with_alternative(graph, request.source, request.destination))


def cli_batch(locations_csv: str, distances_csv: str,
              input_txt: str, output_file: str | None = None) -> None:
    '''
    Lê o arquivo de pedido, carrega o grafo e imprime o relatório.

    Parâmetros
    ----------
    locations_csv, distances_csv : str
    input_txt                    : str (arquivo no formato Chave:Valor)
    output_file                  : str | None
    '''

    request = parse_batch_input_file(input_txt)
    logging.info("Pedido lido de %s: modo=%s %s->%s", input_txt, request.mode, request.source, request.destination)
    graph = CityGraph.load_graph(locations_csv, distances_csv)
    print_route_report(run_batch_request(graph, request), output_file)
