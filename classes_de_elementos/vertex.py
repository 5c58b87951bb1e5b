from dataclasses import dataclass, field
from typing import Optional

@dataclass
class Vertex:
    '''
    Interseção da cidade.
    - id: identificador numérico único e imutável
    - code: código legível opcional (único no grafo quando informado)
    - has_parking: indica se o local oferece estacionamento
    - available: flag administrativa de disponibilidade
    - adj / incoming: handles das arestas de saída e de entrada
    '''
    id: int
    code: Optional[str] = None
    has_parking: bool = False
    available: bool = True
    adj: list[int] = field(default_factory=list)
    incoming: list[int] = field(default_factory=list)
