from algoritmo_de_rotas.route_planner import restricted_route
from classes_de_elementos.city_graph import CityGraph
from funcoes_utilitarias.parse_batch_input_file import parse_id_list, parse_segments
from funcoes_utilitarias.print_route_report import format_restricted_route, print_route_report

def cli_restricted(locations_csv: str, distances_csv: str,
                   source: str, destination: str,
                   avoid_nodes: str = "", avoid_segments: str = "",
                   include_node: str | None = None, output_file: str | None = None) -> None:
    '''
    Calcula a rota de carro com restrições e imprime o relatório.

    Parâmetros
    ----------
    avoid_nodes    : str ("2,3")
    avoid_segments : str ("(1,2),(3,4)")
    include_node   : str | None (id ou código da parada obrigatória)
    '''

    graph = CityGraph.load_graph(locations_csv, distances_csv)
    result = restricted_route(
        graph, source, destination,
        avoid_nodes=parse_id_list(avoid_nodes),
        avoid_segments=parse_segments(avoid_segments),
        include_node=include_node or None,
    )
    print_route_report(format_restricted_route(result), output_file)
