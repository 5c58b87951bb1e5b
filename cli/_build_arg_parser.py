import argparse

from constantes.constantes import DEFAULT_OUTPUT_FILE

def _add_graph_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--locations", dest="locations_csv", required=True, help="CSV de locais (Location,Id,Code,Parking)")
    parser.add_argument("--distances", dest="distances_csv", required=True, help="CSV de distâncias (Location1,Location2,Driving,Walking)")


def _add_route_arguments(parser: argparse.ArgumentParser) -> None:
    _add_graph_arguments(parser)
    parser.add_argument("--source", required=True, help="Id ou código da origem")
    parser.add_argument("--destination", required=True, help="Id ou código do destino")
    parser.add_argument("--output", dest="output_file", default=DEFAULT_OUTPUT_FILE,
                        help="Arquivo onde o relatório também é gravado ('' para não gravar)")


# CLI
def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rota_urbana",
        description=(
            "Planejador de rotas urbanas sobre um grafo de locais e vias:\n"
            " - best: rota mais rápida de carro + alternativa\n"
            " - restricted: rota de carro evitando locais/segmentos, com parada opcional\n"
            " - environmental: carro até um estacionamento + caminhada\n"
            " - batch: executa um arquivo de pedido (Mode:/Source:/...)"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--log-level", dest="log_level", default="INFO", help="Nível de log (ex.: INFO, DEBUG)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    stats = subparsers.add_parser("stats", help="Imprime |V| e |E| do grafo")
    _add_graph_arguments(stats)

    best = subparsers.add_parser("best", help="Melhor rota de carro e alternativa")
    _add_route_arguments(best)

    restricted = subparsers.add_parser("restricted", help="Rota de carro com restrições")
    _add_route_arguments(restricted)
    restricted.add_argument("--avoid-nodes", dest="avoid_nodes", default="", help="Ids a evitar, ex.: 2,3")
    restricted.add_argument("--avoid-segments", dest="avoid_segments", default="", help="Segmentos a evitar, ex.: (1,2),(3,4)")
    restricted.add_argument("--include-node", dest="include_node", default=None, help="Parada obrigatória")

    environmental = subparsers.add_parser("environmental", help="Carro + caminhada com limite de caminhada")
    _add_route_arguments(environmental)
    environmental.add_argument("--max-walk-time", dest="max_walk_time", type=int, required=True, help="Minutos de caminhada permitidos")
    environmental.add_argument("--avoid-nodes", dest="avoid_nodes", default="", help="Ids a evitar, ex.: 2,3")
    environmental.add_argument("--avoid-segments", dest="avoid_segments", default="", help="Segmentos a evitar, ex.: (1,2),(3,4)")

    batch = subparsers.add_parser("batch", help="Executa um arquivo de pedido")
    _add_graph_arguments(batch)
    batch.add_argument("--input", dest="input_txt", required=True, help="Arquivo de pedido (Mode:/Source:/...)")
    batch.add_argument("--output", dest="output_file", default=DEFAULT_OUTPUT_FILE,
                       help="Arquivo onde o relatório também é gravado ('' para não gravar)")
    return parser
