from classes_de_elementos.edge import Edge
from constantes.constantes import DRIVING, WALKING

def _weight_for_mode(travel_mode: str, edge: "Edge") -> float:
    '''
    Retorna o peso da aresta para o modo de viagem informado.

    Parâmetros
    ----------
    travel_mode : str ('driving' | 'walking')
    edge        : Edge

    Retorno
    ----------
    float : drive_time ou walk_time (INF quando o modo não percorre a aresta)
    '''

    mode = travel_mode.lower()
    if mode == DRIVING:
        return edge.drive_time
    if mode == WALKING:
        return edge.walk_time
    raise ValueError(f"Modo de viagem inválido: {travel_mode!r}. Use 'driving' ou 'walking'.")
