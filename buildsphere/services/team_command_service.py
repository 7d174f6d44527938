from typing import Optional

from sqlalchemy.exc import IntegrityError

from buildsphere.database import models
from buildsphere.domain.commands import CreateTeamCommand, UpdateTeamCommand, DeleteTeamCommand
from buildsphere.repositories.interfaces import ITeamRepository, IProjectRepository
from buildsphere.utils.logger_utils import logger


class TeamCommandService:
    """팀 생성, 수정, 삭제 커맨드를 처리합니다."""

    def __init__(self, team_repo: ITeamRepository, project_repo: IProjectRepository):
        """
        TeamCommandService를 초기화합니다.

        Args:
            team_repo: 팀 데이터에 접근하기 위한 리포지토리.
            project_repo: 팀이 소속될 프로젝트의 존재 여부를 검증하기 위한 리포지토리.
        """
        self.team_repo = team_repo
        self.project_repo = project_repo

    def create_team(self, command: CreateTeamCommand) -> Optional[int]:
        """
        새로운 팀을 생성합니다.

        Returns:
            생성된 팀의 ID. 소속 프로젝트가 없거나 저장에 실패하면 None.
        """
        if not self.project_repo.find_by_id(command.project_id):
            logger.warning(f"Team creation rejected: project {command.project_id} not found.")
            return None

        new_team = models.Team(
            project_id=command.project_id,
            name=command.name,
            description=command.description,
        )
        try:
            created_team = self.team_repo.create(new_team)
        except IntegrityError as e:
            logger.warning(f"Team creation rejected by the database: {e.orig}")
            return None

        logger.info(f"Team {created_team.id} created in project {command.project_id}.")
        return created_team.id

    def update_team(self, command: UpdateTeamCommand) -> Optional[models.Team]:
        """
        팀의 이름과 설명을 교체합니다.

        Returns:
            수정된 팀. 팀이 없으면 None이며 아무것도 변경되지 않습니다.
        """
        team = self.team_repo.find_by_id(command.team_id)
        if not team:
            logger.warning(f"Team update rejected: team {command.team_id} not found.")
            return None

        team.name = command.name
        team.description = command.description
        return self.team_repo.update(team)

    def delete_team(self, command: DeleteTeamCommand) -> None:
        """팀을 삭제합니다. 존재하지 않는 ID는 무시합니다."""
        team = self.team_repo.find_by_id(command.team_id)
        if not team:
            logger.info(f"Team {command.team_id} not found, nothing to delete.")
            return
        self.team_repo.delete(team)
        logger.info(f"Team {command.team_id} deleted.")
