class VertexNotFoundError(LookupError):
    '''Identificador ou código de local que não existe no grafo.'''

    def __init__(self, ref) -> None:
        super().__init__(f"Local não encontrado: {ref!r}")
        self.ref = ref
