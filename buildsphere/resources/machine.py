from typing import Optional

from buildsphere.resources.base import CamelModel

class MachineResource(CamelModel):
    id: int
    project_id: int
    name: str
    description: Optional[str] = None
    brand: Optional[str] = None
    status: str
