from constantes.constantes import INF, UNUSABLE_WEIGHT_TOKEN

def _parse_weight(token: str) -> float:
    '''
    Converte a célula de tempo do CSV de distâncias em float.
    'X' significa que o modo não percorre o segmento (INF).
    '''
    text = str(token).strip()
    if text.upper() == UNUSABLE_WEIGHT_TOKEN:
        return INF
    return float(text)
