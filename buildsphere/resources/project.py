from datetime import date
from typing import Optional

from buildsphere.resources.base import CamelModel

# ---------- Project Resources ----------#

class CreateProjectResource(CamelModel):
    name: str
    description: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[date] = None
    expected_end_date: Optional[date] = None
    budget: Optional[float] = None
    url_image: Optional[str] = None
    user_id: int

class ProjectResource(CreateProjectResource):
    id: int
