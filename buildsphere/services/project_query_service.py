from typing import List, Optional

from buildsphere.domain.dashboard import Dashboard
from buildsphere.domain.queries import GetAllProjectsQuery, GetProjectByIdQuery
from buildsphere.repositories.interfaces import IProjectRepository


class ProjectQueryService:
    """프로젝트 조회 쿼리를 처리합니다. 결과는 항상 Dashboard로 감싸서 반환합니다."""

    def __init__(self, project_repo: IProjectRepository):
        self.project_repo = project_repo

    def get_all_projects(self, query: GetAllProjectsQuery) -> List[Dashboard]:
        return [Dashboard(project=p) for p in self.project_repo.list_all()]

    def get_project_by_id(self, query: GetProjectByIdQuery) -> Optional[Dashboard]:
        project = self.project_repo.find_by_id(query.project_id)
        if not project:
            return None
        return Dashboard(project=project)
