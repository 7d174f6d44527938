from typing import Optional

from sqlalchemy.exc import IntegrityError

from buildsphere.database import models
from buildsphere.domain.commands import CreateProjectCommand, UpdateProjectCommand, DeleteProjectCommand
from buildsphere.domain.dashboard import Dashboard
from buildsphere.repositories.interfaces import IProjectRepository
from buildsphere.utils.logger_utils import logger


class ProjectCommandService:
    """프로젝트 생성, 수정, 삭제 커맨드를 처리합니다."""

    def __init__(self, project_repo: IProjectRepository):
        """
        ProjectCommandService를 초기화합니다.

        Args:
            project_repo: 프로젝트 데이터에 접근하기 위한 리포지토리.
        """
        self.project_repo = project_repo

    def create_project(self, command: CreateProjectCommand) -> Optional[Dashboard]:
        """
        새로운 프로젝트를 생성합니다.

        Returns:
            생성된 프로젝트를 감싼 Dashboard. 이름이 중복되거나 값이 유효하지 않거나
            저장에 실패하면 None.
        """
        if self.project_repo.find_by_name(command.name):
            logger.warning(f"Project creation rejected: name '{command.name}' already exists.")
            return None

        reason = _validate_schedule_and_budget(command)
        if reason:
            logger.warning(f"Project creation rejected: {reason}")
            return None

        new_project = models.Project(
            name=command.name,
            description=command.description,
            location=command.location,
            start_date=command.start_date,
            expected_end_date=command.expected_end_date,
            budget=command.budget,
            url_image=command.url_image,
            owner_user_id=command.owner_user_id,
        )
        try:
            created_project = self.project_repo.create(new_project)
        except IntegrityError as e:
            logger.warning(f"Project creation rejected by the database: {e.orig}")
            return None

        dashboard = Dashboard(project=created_project)
        planned = dashboard.planned_duration_days
        logger.info(
            f"Project {created_project.id} '{created_project.name}' created"
            + (f", planned for {planned} days." if planned is not None else ".")
        )
        return dashboard

    def update_project(self, command: UpdateProjectCommand) -> Optional[Dashboard]:
        """
        프로젝트의 변경 가능한 모든 필드를 교체합니다.

        Returns:
            수정된 프로젝트를 감싼 Dashboard. 프로젝트가 없거나 값이 유효하지 않으면 None이며,
            이 경우 아무것도 변경되지 않습니다.
        """
        project = self.project_repo.find_by_id(command.project_id)
        if not project:
            logger.warning(f"Project update rejected: project {command.project_id} not found.")
            return None

        same_name = self.project_repo.find_by_name(command.name)
        if same_name and same_name.id != project.id:
            logger.warning(f"Project update rejected: name '{command.name}' already exists.")
            return None

        reason = _validate_schedule_and_budget(command)
        if reason:
            logger.warning(f"Project update rejected: {reason}")
            return None

        project.name = command.name
        project.description = command.description
        project.location = command.location
        project.start_date = command.start_date
        project.expected_end_date = command.expected_end_date
        project.budget = command.budget
        project.url_image = command.url_image
        project.owner_user_id = command.owner_user_id
        try:
            updated_project = self.project_repo.update(project)
        except IntegrityError as e:
            logger.warning(f"Project update rejected by the database: {e.orig}")
            return None

        logger.info(f"Project {updated_project.id} updated.")
        return Dashboard(project=updated_project)

    def delete_project(self, command: DeleteProjectCommand) -> None:
        """프로젝트를 삭제합니다. 존재하지 않는 ID는 무시합니다."""
        project = self.project_repo.find_by_id(command.project_id)
        if not project:
            logger.info(f"Project {command.project_id} not found, nothing to delete.")
            return
        self.project_repo.delete(project)
        logger.info(f"Project {command.project_id} deleted.")


def _validate_schedule_and_budget(command) -> Optional[str]:
    if command.start_date and command.expected_end_date and command.expected_end_date < command.start_date:
        return "expected end date precedes start date."
    if command.budget is not None and command.budget < 0:
        return "budget must not be negative."
    return None
