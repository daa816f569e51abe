"""
Error types for the gateway.

Every fallible boundary (credential file read, outbound send, body decode)
raises one of the ``GatewayError`` variants below, carrying the original
exception as ``cause``. The HTTP layer maps all of them to a single generic
500 response; the variant is only used for logging.
"""
import logging
from typing import Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class GatewayError(Exception):
    """Base exception for gateway failures."""

    kind = "gateway"

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.message = message
        self.cause = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message


class TransportError(GatewayError):
    """An outbound HTTP call failed at the network layer."""

    kind = "transport"


class CredentialFileError(GatewayError):
    """The credential file could not be read. Only raised at startup."""

    kind = "io"


class SerializationError(GatewayError):
    """A body or file did not parse as the expected JSON shape."""

    kind = "serialization"


async def gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
    """
    Convert any GatewayError into a uniform 500 response.
    """
    logger.error(
        f"[GATEWAY] {exc.kind} error on {request.method} {request.url.path}: "
        f"{exc.message} (cause={exc.cause!r})"
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": f"{exc.kind} error: {exc}"},
    )
