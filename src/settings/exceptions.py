class InvalidAudienceError(ValueError):
    """Raised when a settings audience is neither 'admin' nor 'personal'."""


class ResolutionError(LookupError):
    """Raised by the container when an identifier cannot be resolved."""

    def __init__(self, identifier, message: str | None = None):
        self.identifier = identifier
        super().__init__(message or f"Could not resolve {identifier!r}")
