# tests/services/test_resource_query_services.py
from unittest.mock import MagicMock

from buildsphere.services.material_query_service import MaterialQueryService
from buildsphere.services.machine_query_service import MachineQueryService
from buildsphere.repositories.interfaces import IMaterialRepository, IMachineRepository
from buildsphere.domain.queries import GetAllMaterialsByProjectIdQuery, GetAllMachinesByProjectIdQuery
from buildsphere.domain.valueobjects import ProjectRef
from buildsphere.database import models


def test_get_all_materials_by_project_id():
    """자재 조회가 프로젝트 ID로 위임되는지 테스트합니다."""
    mock_repo = MagicMock(spec=IMaterialRepository)
    materials = [models.Material(id=1, project_id=2, name="Cemento", quantity=10, unit="bolsas")]
    mock_repo.list_by_project_id.return_value = materials

    result = MaterialQueryService(mock_repo).get_all_materials_by_project_id(
        GetAllMaterialsByProjectIdQuery(ProjectRef(2))
    )

    assert result == materials
    mock_repo.list_by_project_id.assert_called_once_with(2)


def test_get_all_machines_by_project_id_empty():
    """장비가 없는 프로젝트는 빈 리스트를 반환합니다."""
    mock_repo = MagicMock(spec=IMachineRepository)
    mock_repo.list_by_project_id.return_value = []

    result = MachineQueryService(mock_repo).get_all_machines_by_project_id(
        GetAllMachinesByProjectIdQuery(ProjectRef(2))
    )

    assert result == []
    mock_repo.list_by_project_id.assert_called_once_with(2)
