"""Domain exceptions."""


class TermGateError(Exception):
    """Base exception for TermGate."""

    pass


class PermissionDenied(TermGateError):
    """Actor does not have permission for the requested action."""

    pass


class NotFound(TermGateError):
    """Requested resource was not found."""

    def __init__(self, kind: str, identifier: object = None) -> None:
        self.kind = kind
        self.identifier = identifier
        if identifier is None:
            super().__init__(f"{kind} not found")
        else:
            super().__init__(f"{kind} not found: {identifier}")


class ValidationError(TermGateError):
    """Validation failed for input data."""

    pass
