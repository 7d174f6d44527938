from buildsphere.domain.commands import CreateProjectCommand, UpdateProjectCommand
from buildsphere.domain.dashboard import Dashboard
from buildsphere.resources.project import CreateProjectResource, ProjectResource


def create_project_command_from_resource(resource: CreateProjectResource) -> CreateProjectCommand:
    return CreateProjectCommand(
        name=resource.name,
        description=resource.description,
        location=resource.location,
        start_date=resource.start_date,
        expected_end_date=resource.expected_end_date,
        budget=resource.budget,
        url_image=resource.url_image,
        owner_user_id=resource.user_id,
    )


def update_project_command_from_resource(project_id: int, resource: CreateProjectResource) -> UpdateProjectCommand:
    """프로젝트 수정은 생성과 같은 본문을 받아 모든 필드를 교체합니다."""
    return UpdateProjectCommand(
        project_id=project_id,
        name=resource.name,
        description=resource.description,
        location=resource.location,
        start_date=resource.start_date,
        expected_end_date=resource.expected_end_date,
        budget=resource.budget,
        url_image=resource.url_image,
        owner_user_id=resource.user_id,
    )


def project_resource_from_dashboard(dashboard: Dashboard) -> ProjectResource:
    project = dashboard.project
    return ProjectResource(
        id=project.id,
        name=project.name,
        description=project.description,
        location=project.location,
        start_date=project.start_date,
        expected_end_date=project.expected_end_date,
        budget=project.budget,
        url_image=project.url_image,
        user_id=project.owner_user_id,
    )
