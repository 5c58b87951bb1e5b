from __future__ import annotations

import textwrap

import pytest

import rota_urbana
from algoritmo_de_rotas.route_planner import best_route_with_alternative, environmental_route, restricted_route
from classes_de_elementos.batch_request import BatchRequest
from cli.cli_batch import run_batch_request
from funcoes_utilitarias._fmt_minutes import _fmt_minutes
from funcoes_utilitarias.parse_batch_input_file import parse_batch_input_file, parse_id_list, parse_segments
from funcoes_utilitarias.print_route_report import (
    format_best_route,
    format_environmental_route,
    format_restricted_route,
    print_route_report,
)


def _write(tmp_path, name: str, body: str):
    path = tmp_path / name
    path.write_text(textwrap.dedent(body), encoding="utf-8")
    return path


# ----------------------------------------------------------------------
# batch file
# ----------------------------------------------------------------------
def test_parse_driving_request_with_restrictions(tmp_path) -> None:
    path = _write(tmp_path, "input.txt", """\
        # pedido de teste
        Mode:driving
        Source:5
        Destination:4
        AvoidNodes:2,3
        AvoidSegments:(4,7),(6,9)
        IncludeNode:6
        """)

    request = parse_batch_input_file(str(path))

    assert request.mode == "driving"
    assert (request.source, request.destination) == ("5", "4")
    assert request.avoid_nodes == [2, 3]
    assert request.avoid_segments == [(4, 7), (6, 9)]
    assert request.include_node == 6
    assert request.has_restrictions
    assert not request.is_environmental


def test_parse_environmental_request_is_case_insensitive(tmp_path) -> None:
    path = _write(tmp_path, "input.txt", """\
        mode:Driving-Walking
        SOURCE:8
        destination:5
        AvoidNodes:
        MaxWalkTime:18
        """)

    request = parse_batch_input_file(str(path))

    assert request.is_environmental
    assert request.max_walk_time == 18
    assert request.avoid_nodes == []


@pytest.mark.parametrize(
    "body,message",
    [
        ("Mode:driving\nSource:1\nDestination:2\nAvoidNodes:2,x\n", "Linha 4"),
        ("Mode:driving\nSource:1\nDestination:2\nAvoidSegments:(1,2),3\n", "Linha 4"),
        ("Mode:flying\nSource:1\nDestination:2\n", "Linha 1"),
        ("Mode:driving\nSource 1\nDestination:2\n", "Linha 2"),
        ("Mode:driving\nSource:1\nColor:blue\nDestination:2\n", "Linha 3"),
        ("Mode:driving-walking\nSource:1\nDestination:2\nMaxWalkTime:-3\n", "Linha 4"),
        ("Mode:driving-walking\nSource:1\nDestination:2\n", "MaxWalkTime"),
        ("Mode:driving\nDestination:2\n", "source"),
    ],
)
def test_parse_errors_point_to_the_problem(tmp_path, body: str, message: str) -> None:
    path = tmp_path / "input.txt"
    path.write_text(body, encoding="utf-8")

    with pytest.raises(ValueError, match=message):
        parse_batch_input_file(str(path))


def test_include_node_not_allowed_in_environmental_mode(tmp_path) -> None:
    path = _write(tmp_path, "input.txt", """\
        Mode:driving-walking
        Source:1
        Destination:4
        IncludeNode:2
        MaxWalkTime:5
        """)

    with pytest.raises(ValueError, match="IncludeNode"):
        parse_batch_input_file(str(path))


def test_list_helpers() -> None:
    assert parse_id_list(" 1, 2 ,3 ") == [1, 2, 3]
    assert parse_id_list("") == []
    assert parse_segments("(1, 2),(3,4)") == [(1, 2), (3, 4)]
    assert parse_segments("") == []
    with pytest.raises(ValueError):
        parse_segments("1,2")


# ----------------------------------------------------------------------
# report
# ----------------------------------------------------------------------
def test_fmt_minutes() -> None:
    assert _fmt_minutes(10.0) == "10"
    assert _fmt_minutes(2.5) == "2.5"
    assert _fmt_minutes(1 / 3) == "0.333"


def test_format_best_route_for_scenario(city_graph) -> None:
    lines = format_best_route(best_route_with_alternative(city_graph, 1, 4))

    assert lines == [
        "Source:1",
        "Destination:4",
        "BestDrivingRoute:1,2,4(10)",
        "AlternativeDrivingRoute:none",
    ]


def test_format_restricted_route(detour_graph, city_graph) -> None:
    found = format_restricted_route(restricted_route(detour_graph, 1, 5, avoid_nodes=[2]))
    missing = format_restricted_route(restricted_route(city_graph, 1, 4, avoid_nodes=[2]))

    assert found[-1] == "RestrictedDrivingRoute:1,3,5(6)"
    assert missing[-1] == "RestrictedDrivingRoute:none"


def test_format_environmental_ok(city_graph) -> None:
    lines = format_environmental_route(environmental_route(city_graph, 1, 4, max_walk_time=4))

    assert lines == [
        "Source:1",
        "Destination:4",
        "DrivingRoute:1,3(3)",
        "ParkingNode:3",
        "WalkingRoute:3,4(4)",
        "TotalTime:7",
    ]


def test_format_environmental_alternatives(parking_graph) -> None:
    lines = format_environmental_route(environmental_route(parking_graph, 1, 9, max_walk_time=5))

    assert lines[2:7] == [
        "DrivingRoute:none",
        "ParkingNode:none",
        "WalkingRoute:none",
        "TotalTime:",
        "Message:No possible route with max. walking time of 5 minutes.",
    ]
    assert "ParkingNode1:6" in lines
    assert "TotalTime2:11" in lines
    assert "ParkingNode3:3" in lines
    assert not any(line.startswith("ParkingNode4") for line in lines)


def test_format_environmental_none(detour_graph) -> None:
    lines = format_environmental_route(environmental_route(detour_graph, 1, 5, max_walk_time=5))

    assert lines[-1] == "Message:No possible route between source and destination through a parking node."


def test_print_route_report_writes_file(tmp_path, capsys) -> None:
    output = tmp_path / "out" / "report.txt"

    print_route_report(["Source:1", "Destination:4"], str(output))

    assert capsys.readouterr().out == "Source:1\nDestination:4\n"
    assert output.read_text(encoding="utf-8") == "Source:1\nDestination:4\n"


# ----------------------------------------------------------------------
# dispatch + entry point
# ----------------------------------------------------------------------
def test_run_batch_request_dispatches_by_mode(city_graph) -> None:
    best = run_batch_request(city_graph, BatchRequest(mode="driving", source="1", destination="4"))
    restricted = run_batch_request(city_graph, BatchRequest(mode="driving", source="A", destination="D", avoid_nodes=[2]))
    environmental = run_batch_request(
        city_graph, BatchRequest(mode="driving-walking", source="1", destination="4", max_walk_time=4)
    )

    assert best[2] == "BestDrivingRoute:1,2,4(10)"
    assert restricted[2] == "RestrictedDrivingRoute:none"
    assert environmental[3] == "ParkingNode:3"


def test_main_batch_writes_output(csv_files, tmp_path, capsys) -> None:
    locations, distances = csv_files
    request = _write(tmp_path, "input.txt", """\
        Mode:driving
        Source:1
        Destination:4
        """)
    output = tmp_path / "output.txt"

    code = rota_urbana.main([
        "batch", "--locations", str(locations), "--distances", str(distances),
        "--input", str(request), "--output", str(output),
    ])

    assert code == 0
    assert "BestDrivingRoute:1,2,4(10)" in capsys.readouterr().out
    assert output.read_text(encoding="utf-8").splitlines()[-1] == "AlternativeDrivingRoute:none"


def test_main_environmental_subcommand(csv_files, tmp_path, capsys) -> None:
    locations, distances = csv_files

    code = rota_urbana.main([
        "environmental", "--locations", str(locations), "--distances", str(distances),
        "--source", "A", "--destination", "D", "--max-walk-time", "4", "--output", "",
    ])

    assert code == 0
    assert "TotalTime:7" in capsys.readouterr().out
    assert not (tmp_path / "output.txt").exists()


def test_main_stats(csv_files, capsys) -> None:
    locations, distances = csv_files

    assert rota_urbana.main(["stats", "--locations", str(locations), "--distances", str(distances)]) == 0
    assert "|V|=4 |E|=8 P=1" in capsys.readouterr().out


def test_main_unknown_location_returns_error(csv_files, tmp_path) -> None:
    locations, distances = csv_files

    code = rota_urbana.main([
        "best", "--locations", str(locations), "--distances", str(distances),
        "--source", "A", "--destination", "ZZ", "--output", str(tmp_path / "o.txt"),
    ])

    assert code == 1
    assert not (tmp_path / "o.txt").exists()


def test_main_missing_input_file_returns_error(csv_files, tmp_path) -> None:
    locations, distances = csv_files

    code = rota_urbana.main([
        "batch", "--locations", str(locations), "--distances", str(distances),
        "--input", str(tmp_path / "nao_existe.txt"), "--output", "",
    ])

    assert code == 1


def test_main_loads_distances_with_extra_trailing_field(tmp_path, capsys) -> None:
    locations = _write(tmp_path, "Locations.csv", """\
        Location,Id,Code,Parking
        Alameda,1,A,0
        Bairro,2,B,0
        Centro,3,C,1
        """)
    distances = _write(tmp_path, "Distances.csv", """\
        Location1,Location2,Driving,Walking
        A,B,5,10
        B,C,1,2,lixo
        A,C,3,6
        """)

    code = rota_urbana.main([
        "best", "--locations", str(locations), "--distances", str(distances),
        "--source", "A", "--destination", "C", "--output", "",
    ])

    assert code == 0
    assert "BestDrivingRoute:1,3(3)" in capsys.readouterr().out


def test_repeated_key_is_rejected_with_line_number(tmp_path) -> None:
    path = _write(tmp_path, "input.txt", """\
        Mode:driving
        Source:1
        Destination:4
        source:2
        """)

    with pytest.raises(ValueError, match="Linha 4.*repetida"):
        parse_batch_input_file(str(path))
