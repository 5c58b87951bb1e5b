from dataclasses import dataclass
from typing import Optional

@dataclass
class Edge:
    '''
    Aresta dirigida origin->dest com:
    - handle (identificador estável dentro do grafo)
    - walk_time, drive_time (minutos; INF quando o modo não pode percorrer)
    - available: flag administrativa de disponibilidade
    - reverse: handle da aresta gêmea quando criada como via de mão dupla

    Observações
    -----------
    As duas metades de uma via de mão dupla são objetos independentes; o
    vínculo 'reverse' serve apenas para contabilidade, não compartilha pesos.
    '''
    handle: int
    origin: int
    dest: int
    walk_time: float
    drive_time: float
    available: bool = True
    reverse: Optional[int] = None
