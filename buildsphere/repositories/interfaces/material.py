from abc import ABC, abstractmethod
from typing import List
from buildsphere.database import models

class IMaterialRepository(ABC):
    @abstractmethod
    def create(self, material_model: models.Material) -> models.Material:
        """새로운 자재 정보를 데이터베이스에 생성합니다."""
        pass

    @abstractmethod
    def list_by_project_id(self, project_id: int) -> List[models.Material]:
        """특정 프로젝트에 배정된 모든 자재의 목록을 조회합니다."""
        pass
