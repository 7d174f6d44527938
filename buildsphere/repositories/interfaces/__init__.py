from .project import IProjectRepository
from .team import ITeamRepository
from .material import IMaterialRepository
from .machine import IMachineRepository

__all__ = ["IProjectRepository", "ITeamRepository", "IMaterialRepository", "IMachineRepository"]
