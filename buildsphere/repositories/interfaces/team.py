from abc import ABC, abstractmethod
from typing import List, Optional
from buildsphere.database import models

class ITeamRepository(ABC):
    @abstractmethod
    def create(self, team_model: models.Team) -> models.Team:
        """새로운 팀을 데이터베이스에 생성합니다."""
        pass

    @abstractmethod
    def find_by_id(self, team_id: int) -> Optional[models.Team]:
        """고유 ID로 특정 팀을 조회합니다."""
        pass

    @abstractmethod
    def list_by_project_id(self, project_id: int) -> List[models.Team]:
        """특정 프로젝트에 속한 모든 팀의 목록을 조회합니다."""
        pass

    @abstractmethod
    def update(self, team_model: models.Team) -> models.Team:
        """변경된 팀 필드를 데이터베이스에 반영합니다."""
        pass

    @abstractmethod
    def delete(self, team: models.Team) -> bool:
        """특정 팀을 데이터베이스에서 삭제합니다."""
        pass
