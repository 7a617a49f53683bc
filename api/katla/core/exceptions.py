"""Service-level exceptions and their HTTP translation.

Services raise these instead of ``HTTPException`` so they can be driven
directly from tests and scripts; ``register_exception_handlers`` maps them
onto responses for the API.
"""
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse


class ServiceError(Exception):
    """Base class for errors raised by the service layer."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)


class RequestedResourceNotFound(ServiceError):
    """The requested identifier does not match any record."""

    def __init__(self, detail: str = "Requested resource not found"):
        super().__init__(detail)


class RequestedResourceHasConflict(ServiceError):
    """A business key collides with another record, or the record is in the wrong state."""

    def __init__(self, field: str | None = None, detail: str | None = None):
        self.field = field
        if detail is None:
            detail = f"Conflict on field '{field}'" if field else "Requested resource has conflict"
        super().__init__(detail)


def register_exception_handlers(app: FastAPI) -> None:
    """Translate service exceptions into JSON error responses."""

    @app.exception_handler(RequestedResourceNotFound)
    async def not_found_handler(request: Request, exc: RequestedResourceNotFound):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": exc.detail},
        )

    @app.exception_handler(RequestedResourceHasConflict)
    async def conflict_handler(request: Request, exc: RequestedResourceHasConflict):
        content = {"detail": exc.detail}
        if exc.field:
            content["field"] = exc.field
        return JSONResponse(status_code=status.HTTP_409_CONFLICT, content=content)
