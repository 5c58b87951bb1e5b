import math

def _check_weight(value: float, label: str) -> float:
    '''
    Valida um tempo de percurso antes de inserir a aresta.

    Parâmetros
    ----------
    value : float (minutos; INF é aceito como "intransitável")
    label : str   (nome do campo, usado na mensagem de erro)

    Retorno
    -------
    float : o próprio valor convertido para float
    '''

    weight = float(value)
    if math.isnan(weight) or weight < 0:
        raise ValueError(f"Tempo inválido para {label}: {value!r}")
    return weight
