import logging
import time
from typing import List

from classes_de_elementos.errors import VertexNotFoundError
from cli._build_arg_parser import _build_arg_parser
from cli.cli_batch import cli_batch
from cli.cli_best import cli_best
from cli.cli_environmental import cli_environmental
from cli.cli_restricted import cli_restricted
from cli.cli_stats import cli_stats

def main(argv: List[str] | None = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    start_time = time.time()
    try:
        if args.command == "stats":
            cli_stats(args.locations_csv, args.distances_csv)
        elif args.command == "best":
            cli_best(args.locations_csv, args.distances_csv, args.source, args.destination, args.output_file)
        elif args.command == "restricted":
            cli_restricted(args.locations_csv, args.distances_csv, args.source, args.destination,
                           args.avoid_nodes, args.avoid_segments, args.include_node, args.output_file)
        elif args.command == "environmental":
            cli_environmental(args.locations_csv, args.distances_csv, args.source, args.destination,
                              args.max_walk_time, args.avoid_nodes, args.avoid_segments, args.output_file)
        elif args.command == "batch":
            cli_batch(args.locations_csv, args.distances_csv, args.input_txt, args.output_file)
    except VertexNotFoundError as exc:
        logging.error("%s", exc)
        return 1
    except (FileNotFoundError, ValueError) as exc:
        logging.error("Entrada inválida: %s", exc)
        return 1

    logging.info("Tempo de execução total: %s segundos.", time.time() - start_time)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
