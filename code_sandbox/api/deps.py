import json

from fastapi import Request
from pydantic import ValidationError

from code_sandbox.core.runtime import DockerRuntime
from code_sandbox.errors import RequestDecodeError
from code_sandbox.schemas import ContainerRequest


def get_runtime(request: Request) -> DockerRuntime:
    """The runtime client built at startup; shared by every request."""
    return request.app.state.runtime


async def decode_container_request(request: Request) -> ContainerRequest:
    """
    Decode the create body, reporting any failure as a RequestDecodeError.

    Only the first JSON value in the body is read; anything after it is
    ignored. A top-level `null` is an empty request.

    Read by hand rather than declared as a body parameter so that malformed
    input maps to 400 with the decoder's text instead of FastAPI's 422.
    """
    body = await request.body()
    try:
        text = body.decode("utf-8").lstrip()
        value, _ = json.JSONDecoder().raw_decode(text)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise RequestDecodeError(str(e)) from e

    if value is None:
        return ContainerRequest()
    try:
        return ContainerRequest.model_validate(value)
    except ValidationError as e:
        raise RequestDecodeError(str(e)) from e
