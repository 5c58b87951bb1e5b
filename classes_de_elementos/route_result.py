from dataclasses import dataclass, field
from typing import List, Optional

from classes_de_elementos.edge import Edge

@dataclass(frozen=True)
class PathResult:
    '''
    Caminho encontrado pelo Dijkstra: arestas na ordem origem→destino e custo
    acumulado no modo usado. Lista vazia com custo 0 = origem igual ao destino.
    '''
    origin: int
    destination: int
    edges: List[Edge]
    cost: float

    def vertex_ids(self) -> List[int]:
        '''
        Sequência de ids visitados, incluindo origem e destino.
        '''
        return [self.origin] + [edge.dest for edge in self.edges]

    def joined_with(self, other: "PathResult") -> "PathResult":
        '''
        Concatena dois trechos (self termina onde other começa).
        '''
        return PathResult(self.origin, other.destination, self.edges + other.edges, self.cost + other.cost)


@dataclass(frozen=True)
class BestRouteResult:
    origin: int
    destination: int
    best: Optional[PathResult]
    alternative: Optional[PathResult]


@dataclass(frozen=True)
class RestrictedRouteResult:
    origin: int
    destination: int
    route: Optional[PathResult]
    include_node: Optional[int] = None


@dataclass(frozen=True)
class EnvironmentalCandidate:
    '''Rota de carro até um estacionamento seguida de caminhada até o destino.'''
    parking_id: int
    driving: PathResult
    walking: PathResult

    @property
    def drive_time(self) -> float:
        return self.driving.cost

    @property
    def walk_time(self) -> float:
        return self.walking.cost

    @property
    def total_time(self) -> float:
        return self.driving.cost + self.walking.cost


ENVIRONMENTAL_OK = "ok"
ENVIRONMENTAL_ALTERNATIVES = "alternatives"
ENVIRONMENTAL_NONE = "none"


@dataclass(frozen=True)
class EnvironmentalRouteResult:
    '''
    Resultado da rota ambiental.
    - status "ok": 'best' respeita o limite de caminhada
    - status "alternatives": nenhum candidato cabe no limite; 'alternatives'
      traz os melhores (ordinal = posição na lista + 1)
    - status "none": nenhum estacionamento permite ir e chegar
    '''
    origin: int
    destination: int
    max_walk_time: float
    status: str
    best: Optional[EnvironmentalCandidate] = None
    alternatives: List[EnvironmentalCandidate] = field(default_factory=list)
