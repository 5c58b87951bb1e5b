from typing import FrozenSet, Iterable, Optional, Tuple

from classes_de_elementos.edge import Edge
from classes_de_elementos.vertex import Vertex

class AvailabilityOverlay:
    '''
    Exclusão temporária de vértices e arestas para uma busca.

    O overlay não altera o grafo: apenas guarda quais ids de vértice e quais
    handles de aresta ficam fora da busca, e é consultado pelo Dijkstra como
    filtro. Descartar o overlay equivale a restaurar a disponibilidade.
    '''
    def __init__(self, vertex_ids: Iterable[int] = (), edge_handles: Iterable[int] = ()) -> None:
        self.excluded_vertex_ids: FrozenSet[int] = frozenset(vertex_ids)
        self.excluded_edge_handles: FrozenSet[int] = frozenset(edge_handles)

    @classmethod
    def from_avoid_lists(cls, graph, avoid_nodes: Optional[Iterable[int]] = None,
                         avoid_segments: Optional[Iterable[Tuple[int, int]]] = None) -> "AvailabilityOverlay":
        '''
        Constrói o overlay a partir das listas de restrição do usuário.

        Parâmetros
        ----------
        graph          : CityGraph
        avoid_nodes    : ids de locais a evitar
        avoid_segments : pares (id, id) de segmentos a evitar

        Retorno
        -------
        AvailabilityOverlay : overlay com exatamente o que foi resolvido

        Observações
        -----------
        - Ids que não existem são ignorados (tratados como erro de digitação).
        - Um segmento exclui apenas a aresta dirigida origem->destino, e todas
          as paralelas nessa direção; a volta só é excluída se também listada.
        '''
        vertex_ids = [node for node in (avoid_nodes or ()) if graph.find_vertex(node) is not None]

        edge_handles: list[int] = []
        for source_id, dest_id in avoid_segments or ():
            if graph.find_vertex(source_id) is None or graph.find_vertex(dest_id) is None:
                continue
            edge_handles.extend(edge.handle for edge in graph.find_edges(source_id, dest_id))

        return cls(vertex_ids, edge_handles)

    @classmethod
    def from_edges(cls, edges: Iterable[Edge]) -> "AvailabilityOverlay":
        return cls(edge_handles=(edge.handle for edge in edges))

    def merged_with(self, other: "AvailabilityOverlay") -> "AvailabilityOverlay":
        return AvailabilityOverlay(
            self.excluded_vertex_ids | other.excluded_vertex_ids,
            self.excluded_edge_handles | other.excluded_edge_handles,
        )

    def allows_vertex(self, vertex: Vertex) -> bool:
        return vertex.available and vertex.id not in self.excluded_vertex_ids

    def allows_edge(self, edge: Edge) -> bool:
        return edge.available and edge.handle not in self.excluded_edge_handles

    def is_empty(self) -> bool:
        return not self.excluded_vertex_ids and not self.excluded_edge_handles

    def __repr__(self) -> str:
        return (f"AvailabilityOverlay(vertices={sorted(self.excluded_vertex_ids)}, "
                f"edges={sorted(self.excluded_edge_handles)})")


NO_RESTRICTIONS = AvailabilityOverlay()
