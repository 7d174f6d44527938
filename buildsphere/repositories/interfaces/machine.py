from abc import ABC, abstractmethod
from typing import List
from buildsphere.database import models

class IMachineRepository(ABC):
    @abstractmethod
    def create(self, machine_model: models.Machine) -> models.Machine:
        """새로운 장비 정보를 데이터베이스에 생성합니다."""
        pass

    @abstractmethod
    def list_by_project_id(self, project_id: int) -> List[models.Machine]:
        """특정 프로젝트에 배정된 모든 장비의 목록을 조회합니다."""
        pass
