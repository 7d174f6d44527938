from dataclasses import dataclass


@dataclass(frozen=True)
class ProjectRef:
    """프로젝트 범위 조회에 사용하는 프로젝트 식별자 값 객체."""
    project_id: int
