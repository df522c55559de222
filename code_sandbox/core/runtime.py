from typing import Any, Dict, List, Optional

import docker
import requests
from docker.errors import DockerException
from docker.utils import kwargs_from_env

from code_sandbox.config import RuntimeConfig
from code_sandbox.errors import ClientInitError, RuntimeCallError

# Failures the SDK can surface: daemon/API errors, and raw transport errors
# that requests raises before the SDK sees a response.
CLIENT_ERRORS = (DockerException, requests.exceptions.RequestException)


class DockerRuntime:
    """
    Thin wrapper over the Docker Engine API client.

    Built once at startup and shared by all requests. The wrapped client is
    never reassigned, and the underlying connection pool handles concurrent
    calls.
    """

    def __init__(self, config: RuntimeConfig):
        try:
            kwargs = kwargs_from_env(environment=config.as_environment())
            self.client = docker.APIClient(version=config.api_version, **kwargs)
        except CLIENT_ERRORS + (ValueError,) as e:  # ValueError: unparseable pinned version
            raise ClientInitError(str(e)) from e

    @property
    def api_version(self) -> str:
        return self.client.api_version

    @property
    def base_url(self) -> str:
        return self.client.base_url

    def list_containers(self) -> List[Dict[str, Any]]:
        """Container descriptors exactly as the daemon returns them."""
        try:
            return self.client.containers()
        except CLIENT_ERRORS as e:
            raise RuntimeCallError(str(e)) from e

    def create_container(self, image: str, cmd: Optional[List[str]] = None) -> str:
        """
        Create (but do not start) a container with a TTY attached.

        Host config, networking config and platform are left to the
        daemon's defaults.

        Returns:
            The id assigned by the daemon.
        """
        try:
            resp = self.client.create_container(
                image=image,
                command=cmd,
                tty=True,
                host_config=None,
                networking_config=None,
                platform=None,
            )
        except CLIENT_ERRORS as e:
            raise RuntimeCallError(str(e)) from e
        return resp["Id"]

    def close(self):
        self.client.close()
