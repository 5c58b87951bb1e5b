from pathlib import Path
from typing import List, Optional

from classes_de_elementos.route_result import (
    ENVIRONMENTAL_ALTERNATIVES,
    ENVIRONMENTAL_OK,
    BestRouteResult,
    EnvironmentalCandidate,
    EnvironmentalRouteResult,
    PathResult,
    RestrictedRouteResult,
)
from funcoes_utilitarias._fmt_minutes import _fmt_minutes

def _route_string(path: Optional[PathResult]) -> str:
    '''
    "1,2,3(10)" para um caminho; "none" quando não há caminho.
    '''
    if path is None:
        return "none"
    ids = ",".join(str(node_id) for node_id in path.vertex_ids())
    return f"{ids}({_fmt_minutes(path.cost)})"


def format_best_route(result: BestRouteResult) -> List[str]:
    return [
        f"Source:{result.origin}",
        f"Destination:{result.destination}",
        f"BestDrivingRoute:{_route_string(result.best)}",
        f"AlternativeDrivingRoute:{_route_string(result.alternative)}",
    ]


def format_restricted_route(result: RestrictedRouteResult) -> List[str]:
    return [
        f"Source:{result.origin}",
        f"Destination:{result.destination}",
        f"RestrictedDrivingRoute:{_route_string(result.route)}",
    ]


def _candidate_lines(candidate: EnvironmentalCandidate, suffix: str = "") -> List[str]:
    return [
        f"DrivingRoute{suffix}:{_route_string(candidate.driving)}",
        f"ParkingNode{suffix}:{candidate.parking_id}",
        f"WalkingRoute{suffix}:{_route_string(candidate.walking)}",
        f"TotalTime{suffix}:{_fmt_minutes(candidate.total_time)}",
    ]


def format_environmental_route(result: EnvironmentalRouteResult) -> List[str]:
    '''
    Formata a rota ambiental. Sem rota dentro do limite, imprime os campos
    com "none", a mensagem explicativa e, se houver, as alternativas
    numeradas (DrivingRoute1, ParkingNode1, ...).
    '''
    lines = [f"Source:{result.origin}", f"Destination:{result.destination}"]
    if result.status == ENVIRONMENTAL_OK:
        return lines + _candidate_lines(result.best)

    lines += ["DrivingRoute:none", "ParkingNode:none", "WalkingRoute:none", "TotalTime:"]
    if result.status == ENVIRONMENTAL_ALTERNATIVES:
        lines.append(f"Message:No possible route with max. walking time of {_fmt_minutes(result.max_walk_time)} minutes.")
        for ordinal, candidate in enumerate(result.alternatives, start=1):
            lines += _candidate_lines(candidate, str(ordinal))
    else:
        lines.append("Message:No possible route between source and destination through a parking node.")
    return lines


def print_route_report(lines: List[str], output_file: Optional[str] = None) -> None:
    '''
    Imprime as linhas do relatório e, se 'output_file' for informado, grava
    o mesmo conteúdo no arquivo (sobrescrevendo).

    Parâmetros
    ----------
    lines       : list[str] (linhas já formatadas)
    output_file : str | None (caminho do arquivo de saída)
    '''

    for line in lines:
        print(line)
    if output_file:
        out_path = Path(output_file)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
