from algoritmo_de_rotas.route_planner import environmental_route
from classes_de_elementos.city_graph import CityGraph
from funcoes_utilitarias.parse_batch_input_file import parse_id_list, parse_segments
from funcoes_utilitarias.print_route_report import format_environmental_route, print_route_report

def cli_environmental(locations_csv: str, distances_csv: str,
                      source: str, destination: str, max_walk_time: int,
                      avoid_nodes: str = "", avoid_segments: str = "",
                      output_file: str | None = None) -> None:
    '''
    Calcula a rota ambiental (carro + caminhada) e imprime o relatório,
    incluindo as alternativas quando o limite de caminhada não é atendido.
    '''

    graph = CityGraph.load_graph(locations_csv, distances_csv)
    result = environmental_route(
        graph, source, destination, max_walk_time,
        avoid_nodes=parse_id_list(avoid_nodes),
        avoid_segments=parse_segments(avoid_segments),
    )
    print_route_report(format_environmental_route(result), output_file)
