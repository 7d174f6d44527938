from dataclasses import dataclass
from typing import Optional

from buildsphere.database import models


@dataclass(frozen=True)
class Dashboard:
    """
    프로젝트 하나와 그로부터 파생되는 정보를 묶는 집합(aggregate)입니다.

    프로젝트 서비스는 항상 Dashboard를 반환하며, API 계층은 `project` 접근자를 통해
    프로젝트 부분만 꺼내 응답을 만듭니다.
    """
    project: models.Project

    @property
    def planned_duration_days(self) -> Optional[int]:
        """시작일부터 완료 예정일까지의 계획 기간(일). 날짜가 하나라도 없으면 None."""
        if self.project.start_date is None or self.project.expected_end_date is None:
            return None
        return (self.project.expected_end_date - self.project.start_date).days
