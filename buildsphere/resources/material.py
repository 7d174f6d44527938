from typing import Optional

from buildsphere.resources.base import CamelModel

class MaterialResource(CamelModel):
    id: int
    project_id: int
    name: str
    description: Optional[str] = None
    quantity: float
    unit: Optional[str] = None
