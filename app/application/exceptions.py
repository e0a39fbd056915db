class ContentUnavailableError(RuntimeError):
    """Raised when the content API cannot be reached or the request fails."""
    pass


class ContentStatusError(ContentUnavailableError):
    """Raised when the content API answers with a non-success status."""
    pass


class ContentContractError(ContentUnavailableError):
    """Raised when the content API answers with a body we cannot decode."""
    pass
