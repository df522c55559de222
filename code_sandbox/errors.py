"""
Code Sandbox - Error types

Every failure reaches the caller as a status code plus the raw error text.
There is no structured error body.
"""

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse


class SandboxError(Exception):
    """Base class for errors raised by this service."""


class ClientInitError(SandboxError):
    """The runtime client could not be built (bad config, daemon unreachable)."""


class RequestDecodeError(SandboxError):
    """The request body is not a valid container request."""


class RuntimeCallError(SandboxError):
    """A call against the container runtime failed."""


async def request_decode_error_handler(_req: Request, exc: RequestDecodeError) -> PlainTextResponse:
    return PlainTextResponse(str(exc), status_code=400)


async def runtime_call_error_handler(_req: Request, exc: RuntimeCallError) -> PlainTextResponse:
    return PlainTextResponse(str(exc), status_code=500)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestDecodeError, request_decode_error_handler)
    app.add_exception_handler(RuntimeCallError, runtime_call_error_handler)
