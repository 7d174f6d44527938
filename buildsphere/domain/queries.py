"""부수 효과 없이 데이터를 조회하는 쿼리 객체들."""
from dataclasses import dataclass

from buildsphere.domain.valueobjects import ProjectRef


@dataclass(frozen=True)
class GetAllProjectsQuery:
    pass


@dataclass(frozen=True)
class GetProjectByIdQuery:
    project_id: int


@dataclass(frozen=True)
class GetTeamByIdQuery:
    team_id: int


@dataclass(frozen=True)
class GetAllTeamsByProjectIdQuery:
    project: ProjectRef


@dataclass(frozen=True)
class GetAllMaterialsByProjectIdQuery:
    project: ProjectRef


@dataclass(frozen=True)
class GetAllMachinesByProjectIdQuery:
    project: ProjectRef
