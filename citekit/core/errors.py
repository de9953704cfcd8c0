"""Exception types raised by the citation engine."""

from http import HTTPStatus


class CitationError(Exception):
    """Base error; ``status`` classifies the failure for callers that map
    errors onto HTTP responses."""

    status = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status: HTTPStatus | None = None):
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status


class StyleNotImplementedError(CitationError):
    status = HTTPStatus.NOT_IMPLEMENTED

    def __init__(self, style: str):
        super().__init__(f"citation style not implemented: {style!r}")
        self.style = style


class NoExplicitCitationError(CitationError):
    status = HTTPStatus.BAD_REQUEST

    def __init__(self, message: str = "no explicit citation for this item"):
        super().__init__(message)


class CitationBuildError(CitationError):
    status = HTTPStatus.BAD_REQUEST
