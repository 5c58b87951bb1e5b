import logging
from typing import Dict, Iterable, List, Optional

import networkx as nx
import pandas as pd

from classes_de_elementos.edge import Edge
from classes_de_elementos.errors import VertexNotFoundError
from classes_de_elementos.vertex import Vertex
from constantes.constantes import DISTANCE_COLUMNS, LOCATION_COLUMNS
from funcoes_utilitarias._check_weight import _check_weight
from funcoes_utilitarias._parse_int import _parse_int
from funcoes_utilitarias._parse_weight import _parse_weight

class CityGraph:
    '''
    Representa a cidade como um multigrafo dirigido G=(V,E).
    - vertices[id] = Vertex
    - edges[handle] = Edge (arena; listas de adjacência guardam apenas handles)
    - code_index[code] = id

    Observações
    -----------
    Os índices por id e por código são sempre atualizados juntos. Vias de mão
    dupla viram duas arestas independentes ligadas pelo campo 'reverse'.
    '''
    def __init__(self) -> None:
        '''
        Inicializa a arena de vértices/arestas e o índice de códigos.
        '''
        self.vertices: Dict[int, Vertex] = {}
        self.edges: Dict[int, Edge] = {}
        self.code_index: Dict[str, int] = {}
        self._next_handle = 0

    # ------------------------------------------------------------------
    # Consulta
    # ------------------------------------------------------------------
    def find_vertex(self, vertex_id: int) -> Optional[Vertex]:
        return self.vertices.get(vertex_id)

    def find_vertex_by_code(self, code: str) -> Optional[Vertex]:
        vertex_id = self.code_index.get(code)
        return None if vertex_id is None else self.vertices[vertex_id]

    def resolve_vertex(self, ref) -> Vertex:
        '''
        Localiza um vértice a partir de um id numérico ou de um código.

        Parâmetros
        ----------
        ref : int | str (id, id em texto ou código do local)

        Retorno
        -------
        Vertex : vértice encontrado

        Observações
        -----------
        Strings são procuradas primeiro como código e só depois como id.
        Lança VertexNotFoundError quando nenhuma das buscas resolve.
        '''
        vertex: Optional[Vertex] = None
        if isinstance(ref, int) and not isinstance(ref, bool):
            vertex = self.find_vertex(ref)
        elif ref is not None:
            text = str(ref).strip()
            vertex = self.find_vertex_by_code(text)
            if vertex is None:
                vertex_id = _parse_int(text)
                if vertex_id is not None:
                    vertex = self.find_vertex(vertex_id)
        if vertex is None:
            raise VertexNotFoundError(ref)
        return vertex

    def edge(self, handle: int) -> Edge:
        return self.edges[handle]

    def outgoing_edges(self, vertex_id: int) -> List[Edge]:
        vertex = self.vertices.get(vertex_id)
        if vertex is None:
            return []
        return [self.edges[handle] for handle in vertex.adj]

    def incoming_edges(self, vertex_id: int) -> List[Edge]:
        vertex = self.vertices.get(vertex_id)
        if vertex is None:
            return []
        return [self.edges[handle] for handle in vertex.incoming]

    def vertex_set(self) -> List[Vertex]:
        return list(self.vertices.values())

    def parking_vertices(self) -> List[Vertex]:
        '''
        Lista os vértices que oferecem estacionamento, em ordem de id.
        '''
        return sorted(
            (vertex for vertex in self.vertices.values() if vertex.has_parking),
            key=lambda vertex: vertex.id,
        )

    def node_count(self) -> int:
        '''
        Retorno
        -------
        int : |V|
        '''
        return len(self.vertices)

    def edge_count(self) -> int:
        '''
        Retorno
        -------
        int : |E| (cada metade de uma via de mão dupla conta uma vez)
        '''
        return len(self.edges)

    # ------------------------------------------------------------------
    # Mutação de vértices
    # ------------------------------------------------------------------
    def add_vertex(self, vertex_id: int, code: Optional[str] = None, has_parking: bool = False) -> bool:
        '''
        Insere um vértice e o indexa por id e, se houver, por código.

        Retorno
        -------
        bool : False (sem alterar o grafo) se o id ou o código já existirem

        Observações
        -----------
        Código vazio ou None não entra no índice de códigos; vários vértices
        podem não ter código.
        '''
        code = code or None
        if vertex_id in self.vertices or (code is not None and code in self.code_index):
            return False
        self.vertices[vertex_id] = Vertex(vertex_id, code, bool(has_parking))
        if code is not None:
            self.code_index[code] = vertex_id
        return True

    def remove_vertex(self, vertex_id: int) -> bool:
        '''
        Remove um vértice com todas as arestas que chegam ou saem dele.

        Retorno
        -------
        bool : False se o vértice não existir
        '''
        vertex = self.vertices.get(vertex_id)
        if vertex is None:
            return False
        for handle in list(vertex.adj) + list(vertex.incoming):
            # laços aparecem nas duas listas
            if handle in self.edges:
                self._detach_edge(handle)
        del self.vertices[vertex_id]
        if vertex.code is not None:
            del self.code_index[vertex.code]
        return True

    def set_vertex_available(self, vertex_id: int, available: bool) -> bool:
        vertex = self.vertices.get(vertex_id)
        if vertex is None:
            return False
        vertex.available = bool(available)
        return True

    # ------------------------------------------------------------------
    # Mutação de arestas
    # ------------------------------------------------------------------
    def _create_edge(self, source_id: int, dest_id: int, walk_time: float, drive_time: float) -> Edge:
        handle = self._next_handle
        self._next_handle += 1
        edge = Edge(handle, source_id, dest_id, walk_time, drive_time)
        self.edges[handle] = edge
        self.vertices[source_id].adj.append(handle)
        self.vertices[dest_id].incoming.append(handle)
        return edge

    def _detach_edge(self, handle: int) -> None:
        edge = self.edges.pop(handle)
        self.vertices[edge.origin].adj.remove(handle)
        self.vertices[edge.dest].incoming.remove(handle)
        if edge.reverse is not None and edge.reverse in self.edges:
            self.edges[edge.reverse].reverse = None

    def add_edge(self, source_id: int, dest_id: int, walk_time: float, drive_time: float) -> bool:
        '''
        Adiciona a aresta dirigida source->dest.

        Parâmetros
        ----------
        source_id, dest_id : int   (ids dos extremos)
        walk_time          : float (minutos a pé; INF se proibido)
        drive_time         : float (minutos de carro; INF se proibido)

        Retorno
        -------
        bool : False se algum dos extremos não existir

        Observações
        -----------
        Tempos negativos ou NaN lançam ValueError antes de qualquer alteração.
        '''
        walk = _check_weight(walk_time, "walk_time")
        drive = _check_weight(drive_time, "drive_time")
        if source_id not in self.vertices or dest_id not in self.vertices:
            return False
        self._create_edge(source_id, dest_id, walk, drive)
        return True

    def add_bidirectional_edge(self, source_id: int, dest_id: int, walk_time: float, drive_time: float) -> bool:
        '''
        Adiciona source->dest e dest->source, ligadas entre si por 'reverse'.
        Atômico: se um dos extremos não existir, nenhuma metade é criada.
        '''
        walk = _check_weight(walk_time, "walk_time")
        drive = _check_weight(drive_time, "drive_time")
        if source_id not in self.vertices or dest_id not in self.vertices:
            return False
        forward = self._create_edge(source_id, dest_id, walk, drive)
        backward = self._create_edge(dest_id, source_id, walk, drive)
        forward.reverse = backward.handle
        backward.reverse = forward.handle
        return True

    def add_edge_by_code(self, source_code: str, dest_code: str, walk_time: float, drive_time: float) -> bool:
        source = self.find_vertex_by_code(source_code)
        dest = self.find_vertex_by_code(dest_code)
        if source is None or dest is None:
            return False
        return self.add_edge(source.id, dest.id, walk_time, drive_time)

    def add_bidirectional_edge_by_code(self, source_code: str, dest_code: str,
                                       walk_time: float, drive_time: float) -> bool:
        source = self.find_vertex_by_code(source_code)
        dest = self.find_vertex_by_code(dest_code)
        if source is None or dest is None:
            return False
        return self.add_bidirectional_edge(source.id, dest.id, walk_time, drive_time)

    def remove_edge(self, source_id: int, dest_id: int) -> bool:
        '''
        Remove todas as arestas paralelas source->dest (multigrafo).
        A direção contrária permanece intacta.

        Retorno
        -------
        bool : True se ao menos uma aresta foi removida
        '''
        source = self.vertices.get(source_id)
        if source is None:
            return False
        matching = [handle for handle in source.adj if self.edges[handle].dest == dest_id]
        for handle in matching:
            self._detach_edge(handle)
        return bool(matching)

    def set_edge_available(self, handle: int, available: bool) -> bool:
        edge = self.edges.get(handle)
        if edge is None:
            return False
        edge.available = bool(available)
        return True

    def find_edges(self, source_id: int, dest_id: int) -> List[Edge]:
        return [edge for edge in self.outgoing_edges(source_id) if edge.dest == dest_id]

    # ------------------------------------------------------------------
    # Carregamento / exportação
    # ------------------------------------------------------------------
    @classmethod
    def load_graph(cls, locations_csv: str, distances_csv: str) -> "CityGraph":
        '''
        Lê os CSVs de locais (Location,Id,Code,Parking) e de distâncias
        (Location1,Location2,Driving,Walking) e constrói o grafo.

        Parâmetros
        ----------
        locations_csv : caminho do CSV de locais
        distances_csv : caminho do CSV de distâncias

        Retorno
        -------
        CityGraph : instância pronta para consulta

        Observações
        -----------
        - Linhas malformadas são ignoradas com aviso no log.
        - Extremos das distâncias podem ser ids ou códigos; 'X' = intransitável.
        - Cada linha de distância gera uma via de mão dupla.
        '''
        graph = cls()
        graph.load_locations(locations_csv)
        graph.load_distances(distances_csv)
        logging.info("Grafo carregado: |V|=%d |E|=%d", graph.node_count(), graph.edge_count())
        return graph

    def load_locations(self, locations_csv: str) -> None:
        locations_df = _read_table(locations_csv, LOCATION_COLUMNS)
        for idx, row in locations_df.iterrows():
            line_number = int(idx) + 2
            code = row["Code"].strip()
            vertex_id = _parse_int(row["Id"])
            if not code:
                logging.warning("Linha %d ignorada: código de local vazio", line_number)
                continue
            if vertex_id is None:
                logging.warning("Linha %d ignorada: id inválido %r", line_number, row["Id"])
                continue
            if not self.add_vertex(vertex_id, code, row["Parking"].strip() == "1"):
                logging.error("Linha %d ignorada: id %d ou código %s duplicado", line_number, vertex_id, code)

    def load_distances(self, distances_csv: str) -> None:
        distances_df = _read_table(distances_csv, DISTANCE_COLUMNS)
        for idx, row in distances_df.iterrows():
            line_number = int(idx) + 2
            try:
                source = self.resolve_vertex(row["Location1"])
                dest = self.resolve_vertex(row["Location2"])
                drive_time = _parse_weight(row["Driving"])
                walk_time = _parse_weight(row["Walking"])
                self.add_bidirectional_edge(source.id, dest.id, walk_time, drive_time)
            except (VertexNotFoundError, ValueError) as exc:
                logging.warning("Linha %d ignorada: %s", line_number, exc)

    def to_networkx(self) -> nx.MultiDiGraph:
        '''
        Exporta o grafo para um nx.MultiDiGraph (nós com code/parking e
        arestas com key=handle, drive_time, walk_time, available).
        '''
        G = nx.MultiDiGraph()
        for vertex in self.vertices.values():
            G.add_node(vertex.id, code=vertex.code, parking=vertex.has_parking, available=vertex.available)
        for edge in self.edges.values():
            G.add_edge(edge.origin, edge.dest, key=edge.handle,
                       drive_time=edge.drive_time, walk_time=edge.walk_time, available=edge.available)
        return G


def _read_table(csv_path: str, columns: Iterable[str]) -> pd.DataFrame:
    '''
    Lê um CSV como texto. Linhas com campos a mais que o cabeçalho são
    aproveitadas só até a última coluna do cabeçalho, com aviso no log.
    '''
    header_size = len(pd.read_csv(csv_path, nrows=0).columns)

    def _trim_extra_fields(bad_line: List[str]) -> List[str]:
        logging.warning("%s: campos extras ignorados em %s", csv_path, ",".join(bad_line))
        return bad_line[:header_size]

    table = pd.read_csv(
        csv_path,
        dtype=str,
        keep_default_na=False,
        skipinitialspace=True,
        engine="python",
        on_bad_lines=_trim_extra_fields,
    ).fillna("")
    table.columns = [str(column).strip() for column in table.columns]
    missing = [column for column in columns if column not in table.columns]
    if missing:
        raise ValueError(f"{csv_path}: colunas ausentes {missing}")
    return table
