from .project import Project
from .team import Team
from .material import Material
from .machine import Machine

__all__ = ["Project", "Team", "Material", "Machine"]
