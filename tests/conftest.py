from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from classes_de_elementos.city_graph import CityGraph
from constantes.constantes import INF

A, B, C, D = 1, 2, 3, 4


@pytest.fixture
def city_graph() -> CityGraph:
    '''A-B (5/10), B-D (5/10), A-C (3/6, C com estacionamento), C-D só a pé (4).'''
    graph = CityGraph()
    graph.add_vertex(A, "A", False)
    graph.add_vertex(B, "B", False)
    graph.add_vertex(C, "C", True)
    graph.add_vertex(D, "D", False)
    graph.add_bidirectional_edge(A, B, walk_time=10, drive_time=5)
    graph.add_bidirectional_edge(B, D, walk_time=10, drive_time=5)
    graph.add_bidirectional_edge(A, C, walk_time=6, drive_time=3)
    graph.add_bidirectional_edge(C, D, walk_time=4, drive_time=INF)
    return graph


@pytest.fixture
def detour_graph() -> CityGraph:
    '''Três corredores disjuntos de carro 1->5: por 2 (4), por 3 (6), por 4 (8).'''
    graph = CityGraph()
    for node_id in range(1, 6):
        graph.add_vertex(node_id, f"N{node_id}", False)
    for middle, drive in ((2, 2), (3, 3), (4, 4)):
        graph.add_bidirectional_edge(1, middle, walk_time=2 * drive, drive_time=drive)
        graph.add_bidirectional_edge(middle, 5, walk_time=2 * drive, drive_time=drive)
    return graph


@pytest.fixture
def parking_graph() -> CityGraph:
    '''
    Origem 1, destino 9, estacionamentos 2..6 alcançáveis de 1 só de carro
    e ligados a 9 só a pé. (carro, a pé):
    2=(5,6) 3=(3,8) 4=(7,6) 5=(8,6) 6=(1,9)
    '''
    graph = CityGraph()
    graph.add_vertex(1, "ORIG", True)
    graph.add_vertex(9, "DEST", False)
    for parking_id, drive, walk in ((2, 5, 6), (3, 3, 8), (4, 7, 6), (5, 8, 6), (6, 1, 9)):
        graph.add_vertex(parking_id, f"P{parking_id}", True)
        graph.add_bidirectional_edge(1, parking_id, walk_time=INF, drive_time=drive)
        graph.add_bidirectional_edge(parking_id, 9, walk_time=walk, drive_time=INF)
    return graph


@pytest.fixture
def csv_files(tmp_path: Path) -> tuple[Path, Path]:
    locations = tmp_path / "Locations.csv"
    distances = tmp_path / "Distances.csv"
    locations.write_text(
        textwrap.dedent(
            """\
            Location,Id,Code,Parking
            Alameda,1,A,0
            Bairro,2,B,0
            Centro,3,C,1
            Doca,4,D,0
            """
        ),
        encoding="utf-8",
    )
    distances.write_text(
        textwrap.dedent(
            """\
            Location1,Location2,Driving,Walking
            A,B,5,10
            B,D,5,10
            A,C,3,6
            C,D,X,4
            """
        ),
        encoding="utf-8",
    )
    return locations, distances
