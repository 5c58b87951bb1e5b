from classes_de_elementos.city_graph import CityGraph

def cli_stats(locations_csv: str, distances_csv: str) -> None:
    '''
    Carrega o grafo a partir dos CSVs e imprime estatísticas básicas:
    |V|, |E| e quantidade de estacionamentos.

    Parâmetros
    ----------
    locations_csv : str (caminho para CSV de locais)
    distances_csv : str (caminho para CSV de distâncias)

    Retorno
    -------
    None
    '''

    graph = CityGraph.load_graph(locations_csv, distances_csv)
    print(f"CityGraph |V|={graph.node_count()} |E|={graph.edge_count()} P={len(graph.parking_vertices())}")
