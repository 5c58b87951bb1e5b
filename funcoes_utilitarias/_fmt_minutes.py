def _fmt_minutes(value: float) -> str:
    '''
    Formata um tempo em minutos para o relatório:
    sem casas se inteiro; até 3 casas sem zeros à direita caso contrário.

    Parâmetros
    ----------
    value : float

    Retorno
    -------
    str : representação amigável do tempo
    '''

    return str(int(round(value))) if abs(value - round(value)) < 1e-9 else f"{value:.3f}".rstrip("0").rstrip(".")
