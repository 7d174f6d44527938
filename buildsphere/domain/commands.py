"""
상태 변경을 요청하는 커맨드 객체들.

모든 커맨드는 불변(frozen)이며, 어셈블러가 요청 리소스로부터 만들어
서비스에 전달합니다.
"""
from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class CreateProjectCommand:
    name: str
    description: Optional[str]
    location: Optional[str]
    start_date: Optional[date]
    expected_end_date: Optional[date]
    budget: Optional[float]
    url_image: Optional[str]
    owner_user_id: int


@dataclass(frozen=True)
class UpdateProjectCommand:
    project_id: int
    name: str
    description: Optional[str]
    location: Optional[str]
    start_date: Optional[date]
    expected_end_date: Optional[date]
    budget: Optional[float]
    url_image: Optional[str]
    owner_user_id: int


@dataclass(frozen=True)
class DeleteProjectCommand:
    project_id: int


@dataclass(frozen=True)
class CreateTeamCommand:
    project_id: int
    name: str
    description: Optional[str]


@dataclass(frozen=True)
class UpdateTeamCommand:
    team_id: int
    name: str
    description: Optional[str]


@dataclass(frozen=True)
class DeleteTeamCommand:
    team_id: int
