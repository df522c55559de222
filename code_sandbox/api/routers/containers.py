from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Request

from code_sandbox.api.deps import decode_container_request, get_runtime
from code_sandbox.core.runtime import DockerRuntime
from code_sandbox.schemas import ContainerCreated, ContainerRequest

router = APIRouter()


@router.get("")
def list_containers(runtime: DockerRuntime = Depends(get_runtime)) -> List[Dict[str, Any]]:
    return runtime.list_containers()


@router.post("", status_code=201, response_model=ContainerCreated)
def create_container(
    request: Request,
    req: ContainerRequest = Depends(decode_container_request),
    runtime: DockerRuntime = Depends(get_runtime),
):
    """
    Creates a container from the requested image (or the default one).
    The container is not started.
    """
    image = req.image or request.app.state.settings.DEFAULT_IMAGE
    container_id = runtime.create_container(image, req.cmd)
    return ContainerCreated(id=container_id)
