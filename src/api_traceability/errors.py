"""Exceptions raised by the traceability pipeline.

Each error carries an HTTP-style status code so an API layer can map it
to a response without knowing the pipeline internals.
"""


class TraceabilityError(Exception):
    """Base error for the package."""

    def __init__(self, detail: str, status_code: int = 500):
        self.detail = detail
        self.status_code = status_code
        super().__init__(detail)


class MalformedSpecError(TraceabilityError):
    """Specification text is neither valid JSON nor valid YAML."""

    def __init__(self, detail: str = "Malformed specification"):
        super().__init__(detail=detail, status_code=400)


class SpecFetchError(TraceabilityError):
    """Specification could not be downloaded."""

    def __init__(self, detail: str = "Could not fetch specification"):
        super().__init__(detail=detail, status_code=502)


class SpecValidationError(TraceabilityError):
    """Specification failed the structural checks."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__(detail="; ".join(self.errors) or "Invalid specification", status_code=422)


class MatrixNotFoundError(TraceabilityError):
    """No matrix has been generated for the project yet."""

    def __init__(self, detail: str = "Traceability matrix not found"):
        super().__init__(detail=detail, status_code=404)
