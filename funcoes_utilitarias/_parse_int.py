def _parse_int(token) -> int | None:
    '''
    Tenta interpretar um token como inteiro (aceita espaços ao redor).

    Retorno
    -------
    int | None : valor inteiro; None quando o token não é numérico
    '''
    if isinstance(token, bool):
        return None
    if isinstance(token, int):
        return token
    text = str(token).strip()
    if text.startswith(("-", "+")):
        digits = text[1:]
    else:
        digits = text
    if not digits.isdigit():
        return None
    return int(text)
