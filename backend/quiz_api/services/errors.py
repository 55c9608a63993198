class NotFoundError(LookupError):
    """The requested row does not exist."""

    entity = "registro"

    def __init__(self, entity_id):
        self.entity_id = entity_id
        super().__init__(f"{self.entity} {entity_id} nao encontrado")


class ConflictError(ValueError):
    """The write would violate a uniqueness rule."""


class ParticipantNotFound(NotFoundError):
    entity = "participante"


class ElementNotFound(NotFoundError):
    entity = "elemento"


class ElementConflict(ConflictError):
    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"ja existe um elemento com simbolo {symbol}")
