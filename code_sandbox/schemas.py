from typing import List, Optional

from pydantic import BaseModel


class ContainerRequest(BaseModel):
    image: Optional[str] = None   # empty or missing -> service default image
    cmd: Optional[List[str]] = None


class ContainerCreated(BaseModel):
    id: str
