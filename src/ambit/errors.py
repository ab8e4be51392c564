__all__ = ["ResolutionError", "NotFoundError"]


class ResolutionError(Exception):
    """Raised when an injected value cannot be resolved or is misannotated."""

    pass


class NotFoundError(ResolutionError):
    """Raised when no scope yields a value for a request that is not nullable.

    Attributes:
        request: The request that could not be satisfied.
    """

    def __init__(self, request):
        self.request = request
        super().__init__(
            f"Cannot retrieve {request.describe()} within the current context."
        )
