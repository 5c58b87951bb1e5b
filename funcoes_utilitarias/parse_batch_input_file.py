import re

from classes_de_elementos.batch_request import BatchRequest
from constantes.constantes import BATCH_MODE_DRIVING, BATCH_MODE_ENVIRONMENTAL
from funcoes_utilitarias._parse_int import _parse_int

_SEGMENT_RE = re.compile(r'\(\s*([+-]?\d+)\s*,\s*([+-]?\d+)\s*\)')
_KNOWN_KEYS = {
    "mode", "source", "destination", "avoidnodes",
    "avoidsegments", "includenode", "maxwalktime",
}

def parse_id_list(value: str) -> list[int]:
    '''
    "2,3,7" -> [2, 3, 7]. String vazia -> [].
    '''
    ids: list[int] = []
    for token in [t.strip() for t in value.split(",") if t.strip()]:
        node_id = _parse_int(token)
        if node_id is None:
            raise ValueError(f"id inválido {token!r}")
        ids.append(node_id)
    return ids


def parse_segments(value: str) -> list[tuple[int, int]]:
    '''
    "(4,7),(6,9)" -> [(4, 7), (6, 9)]. String vazia -> [].
    '''
    segments = [(int(a), int(b)) for a, b in _SEGMENT_RE.findall(value)]
    # tudo que não for "(a,b)" nem separador é lixo
    leftover = _SEGMENT_RE.sub("", value).replace(",", "").strip()
    if leftover:
        raise ValueError(f"segmentos inválidos {value!r}. Esperado: (id,id),(id,id)")
    return segments


def parse_batch_input_file(file_path: str) -> BatchRequest:
    '''
    Lê um arquivo texto de pedido no formato "Chave:Valor", por exemplo:

    Mode:driving
    Source:5
    Destination:4
    AvoidNodes:2,3
    AvoidSegments:(4,7),(6,9)
    IncludeNode:6

    ou, para a rota ambiental:

    Mode:driving-walking
    Source:8
    Destination:5
    MaxWalkTime:18

    Parâmetros
    ----------
    file_path : str (caminho do arquivo)

    Retorno
    -------
    BatchRequest : pedido validado

    Observações
    -----------
    - Linhas vazias e comentários (#) são ignorados; chaves não diferenciam
      maiúsculas de minúsculas; valores vazios equivalem a "não informado".
    - Chave repetida é erro.
    - Mensagens de erro (ValueError) incluem a linha problemática.
    '''

    with open(file_path, "r", encoding="utf-8") as f:
        raw_lines = [ln.rstrip("\n") for ln in f]

    values: dict[str, tuple[str, int]] = {}
    for line_number, line in enumerate(raw_lines, start=1):
        text = line.strip()
        if not text or text.startswith("#"):
            continue
        if ":" not in text:
            raise ValueError(f"Linha {line_number} inválida: {line!r}. Esperado: <Chave>:<Valor>")
        key, value = [part.strip() for part in text.split(":", 1)]
        normalized = key.lower()
        if normalized not in _KNOWN_KEYS:
            raise ValueError(f"Linha {line_number}: chave desconhecida {key!r}")
        if normalized in values:
            raise ValueError(f"Linha {line_number}: chave {key!r} repetida (já definida na linha {values[normalized][1]})")
        values[normalized] = (value, line_number)

    for required in ("mode", "source", "destination"):
        if not values.get(required, ("", 0))[0]:
            raise ValueError(f"Campo obrigatório ausente: {required}")

    mode, mode_line = values["mode"]
    mode = mode.lower()
    if mode not in (BATCH_MODE_DRIVING, BATCH_MODE_ENVIRONMENTAL):
        raise ValueError(f"Linha {mode_line}: modo inválido {mode!r}")

    request = BatchRequest(mode=mode, source=values["source"][0], destination=values["destination"][0])

    for key, parse in (("avoidnodes", parse_id_list), ("avoidsegments", parse_segments)):
        if key not in values:
            continue
        value, line_number = values[key]
        try:
            parsed = parse(value)
        except ValueError as exc:
            raise ValueError(f"Linha {line_number}: {exc}") from exc
        if key == "avoidnodes":
            request.avoid_nodes = parsed
        else:
            request.avoid_segments = parsed

    include_value, include_line = values.get("includenode", ("", 0))
    if include_value:
        request.include_node = _parse_int(include_value)
        if request.include_node is None:
            raise ValueError(f"Linha {include_line}: IncludeNode inválido {include_value!r}")

    walk_value, walk_line = values.get("maxwalktime", ("", 0))
    if walk_value:
        request.max_walk_time = _parse_int(walk_value)
        if request.max_walk_time is None or request.max_walk_time < 0:
            raise ValueError(f"Linha {walk_line}: MaxWalkTime inválido {walk_value!r}")

    if request.is_environmental:
        if request.max_walk_time is None:
            raise ValueError("Modo driving-walking exige MaxWalkTime")
        if request.include_node is not None:
            raise ValueError(f"Linha {include_line}: IncludeNode não se aplica ao modo driving-walking")

    return request
