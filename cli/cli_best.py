from algoritmo_de_rotas.route_planner import best_route_with_alternative
from classes_de_elementos.city_graph import CityGraph
from funcoes_utilitarias.print_route_report import format_best_route, print_route_report

def cli_best(locations_csv: str, distances_csv: str,
             source: str, destination: str, output_file: str | None = None) -> None:
    '''
    Calcula a melhor rota de carro e a alternativa entre dois locais e
    imprime o relatório (também gravado em 'output_file').

    Parâmetros
    ----------
    locations_csv, distances_csv : str
    source, destination          : str (id ou código)
    output_file                  : str | None

    Retorno
    -------
    None
    '''

    graph = CityGraph.load_graph(locations_csv, distances_csv)
    result = best_route_with_alternative(graph, source, destination)
    print_route_report(format_best_route(result), output_file)
