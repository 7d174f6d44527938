from abc import ABC, abstractmethod
from typing import List, Optional
from buildsphere.database import models

class IProjectRepository(ABC):
    @abstractmethod
    def create(self, project_model: models.Project) -> models.Project:
        """
        새로운 프로젝트를 데이터베이스에 생성합니다.

        Raises:
            IntegrityError: 제약 조건(이름 중복 등)을 위반했을 때. 세션은 롤백된 상태로 남습니다.
        """
        pass

    @abstractmethod
    def find_by_id(self, project_id: int) -> Optional[models.Project]:
        """고유 ID로 특정 프로젝트를 조회합니다."""
        pass

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[models.Project]:
        """이름으로 특정 프로젝트를 조회합니다."""
        pass

    @abstractmethod
    def list_all(self) -> List[models.Project]:
        """모든 프로젝트의 목록을 조회합니다."""
        pass

    @abstractmethod
    def update(self, project_model: models.Project) -> models.Project:
        """변경된 프로젝트 필드를 데이터베이스에 반영합니다."""
        pass

    @abstractmethod
    def delete(self, project: models.Project) -> bool:
        """특정 프로젝트(소속 팀, 자재, 장비 포함)를 데이터베이스에서 삭제합니다."""
        pass
