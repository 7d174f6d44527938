from typing import List, Optional

from buildsphere.database import models
from buildsphere.domain.queries import GetTeamByIdQuery, GetAllTeamsByProjectIdQuery
from buildsphere.repositories.interfaces import ITeamRepository


class TeamQueryService:
    def __init__(self, team_repo: ITeamRepository):
        self.team_repo = team_repo

    def get_team_by_id(self, query: GetTeamByIdQuery) -> Optional[models.Team]:
        return self.team_repo.find_by_id(query.team_id)

    def get_all_teams_by_project_id(self, query: GetAllTeamsByProjectIdQuery) -> List[models.Team]:
        """프로젝트에 속한 팀 목록. 팀이 없거나 프로젝트가 없으면 빈 리스트."""
        return self.team_repo.list_by_project_id(query.project.project_id)
