from typing import Optional

from buildsphere.resources.base import CamelModel

# ---------- Team Resources ----------#

class CreateTeamResource(CamelModel):
    project_id: int
    name: str
    description: Optional[str] = None

class UpdateTeamResource(CamelModel):
    name: str
    description: Optional[str] = None

class TeamResource(CreateTeamResource):
    id: int
