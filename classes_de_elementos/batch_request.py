from dataclasses import dataclass, field
from typing import Optional

from constantes.constantes import BATCH_MODE_ENVIRONMENTAL

@dataclass
class BatchRequest:
    '''Pedido lido do arquivo de lote (um cálculo de rota por arquivo).'''
    mode: str
    source: str
    destination: str
    avoid_nodes: list[int] = field(default_factory=list)
    avoid_segments: list[tuple[int, int]] = field(default_factory=list)
    include_node: Optional[int] = None
    max_walk_time: Optional[int] = None

    @property
    def is_environmental(self) -> bool:
        return self.mode == BATCH_MODE_ENVIRONMENTAL

    @property
    def has_restrictions(self) -> bool:
        '''
        True quando há qualquer restrição (locais, segmentos ou parada);
        nesse caso o modo 'driving' usa a rota restrita.
        '''
        return bool(self.avoid_nodes or self.avoid_segments or self.include_node is not None)
