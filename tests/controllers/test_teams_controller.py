# tests/controllers/test_teams_controller.py
import json
import pytest
from unittest.mock import MagicMock
from pydantic import ValidationError

from buildsphere.controllers.teams_controller import TeamsController
from buildsphere.services.team_command_service import TeamCommandService
from buildsphere.services.team_query_service import TeamQueryService
from buildsphere.domain.commands import CreateTeamCommand, UpdateTeamCommand, DeleteTeamCommand
from buildsphere.domain.queries import GetTeamByIdQuery, GetAllTeamsByProjectIdQuery
from buildsphere.domain.valueobjects import ProjectRef
from buildsphere.database import models

# ===================================================================
#  Fixture 설정
# ===================================================================

@pytest.fixture
def mock_command_service() -> MagicMock:
    return MagicMock(spec=TeamCommandService)

@pytest.fixture
def mock_query_service() -> MagicMock:
    return MagicMock(spec=TeamQueryService)

@pytest.fixture
def controller(mock_command_service, mock_query_service) -> TeamsController:
    """모의 서비스를 주입한 TeamsController를 생성합니다."""
    return TeamsController(mock_command_service, mock_query_service)

# ===================================================================
#  팀 생성
# ===================================================================
class TestCreateTeam:
    def test_create_team_refetches_and_returns_201(self, controller, mock_command_service, mock_query_service, make_environ):
        """생성 후 ID로 다시 조회한 팀을 201로 반환하는지 테스트합니다."""
        # === Arrange ===
        mock_command_service.create_team.return_value = 8
        mock_query_service.get_team_by_id.return_value = models.Team(
            id=8, project_id=1, name="Estructuras", description="Concreto"
        )
        environ = make_environ("POST", "/api/v1/teams", {"projectId": 1, "name": "Estructuras", "description": "Concreto"})

        # === Act ===
        status, body, content_type = controller.create_team(environ)

        # === Assert ===
        assert status == "201 Created"
        assert content_type == "application/json"
        assert json.loads(body) == {"id": 8, "projectId": 1, "name": "Estructuras", "description": "Concreto"}
        mock_command_service.create_team.assert_called_once_with(
            CreateTeamCommand(project_id=1, name="Estructuras", description="Concreto")
        )
        mock_query_service.get_team_by_id.assert_called_once_with(GetTeamByIdQuery(8))

    def test_create_team_rejected_returns_400(self, controller, mock_command_service, mock_query_service, make_environ):
        """서비스가 None을 반환하면 빈 본문의 400을 반환하는지 테스트합니다."""
        mock_command_service.create_team.return_value = None
        environ = make_environ("POST", "/api/v1/teams", {"projectId": 99, "name": "X"})

        status, body, _ = controller.create_team(environ)

        assert status == "400 Bad Request"
        assert body == ""
        mock_query_service.get_team_by_id.assert_not_called()

    def test_create_team_refetch_missing_returns_400(self, controller, mock_command_service, mock_query_service, make_environ):
        mock_command_service.create_team.return_value = 8
        mock_query_service.get_team_by_id.return_value = None

        status, body, _ = controller.create_team(make_environ("POST", "/api/v1/teams", {"projectId": 1, "name": "X"}))

        assert status == "400 Bad Request"
        assert body == ""

    def test_create_team_with_missing_field_raises_validation_error(self, controller, make_environ):
        """필수 필드가 없으면 ValidationError를 올려 앱 계층이 400으로 매핑하도록 합니다."""
        with pytest.raises(ValidationError):
            controller.create_team(make_environ("POST", "/api/v1/teams", {"name": "X"}))

# ===================================================================
#  팀 조회/수정/삭제
# ===================================================================
class TestTeamEndpoints:
    def test_get_team(self, controller, mock_query_service, make_environ):
        mock_query_service.get_team_by_id.return_value = models.Team(id=2, project_id=1, name="A", description=None)

        status, body, _ = controller.get_team(make_environ("GET", "/api/v1/teams/2"), "2")

        assert status == "200 OK"
        assert json.loads(body)["id"] == 2
        mock_query_service.get_team_by_id.assert_called_once_with(GetTeamByIdQuery(2))

    def test_get_team_not_found(self, controller, mock_query_service, make_environ):
        mock_query_service.get_team_by_id.return_value = None

        status, body, _ = controller.get_team(make_environ("GET", "/api/v1/teams/2"), "2")

        assert status == "404 Not Found"
        assert body == ""

    def test_get_all_teams_by_project_id(self, controller, mock_query_service, make_environ):
        """프로젝트별 팀 목록을 리스트로 반환하고, 비어있어도 200인지 테스트합니다."""
        mock_query_service.get_all_teams_by_project_id.return_value = []

        status, body, _ = controller.get_all_teams_by_project_id(make_environ("GET", "/api/v1/teams/projectId/5"), "5")

        assert status == "200 OK"
        assert json.loads(body) == []
        mock_query_service.get_all_teams_by_project_id.assert_called_once_with(
            GetAllTeamsByProjectIdQuery(ProjectRef(5))
        )

    def test_update_team(self, controller, mock_command_service, make_environ):
        mock_command_service.update_team.return_value = models.Team(id=2, project_id=1, name="B", description="d")

        status, body, _ = controller.update_team(
            make_environ("PUT", "/api/v1/teams/2", {"name": "B", "description": "d"}), "2"
        )

        assert status == "200 OK"
        assert json.loads(body) == {"id": 2, "projectId": 1, "name": "B", "description": "d"}
        mock_command_service.update_team.assert_called_once_with(UpdateTeamCommand(team_id=2, name="B", description="d"))

    def test_update_team_not_found_returns_400(self, controller, mock_command_service, make_environ):
        mock_command_service.update_team.return_value = None

        status, body, _ = controller.update_team(make_environ("PUT", "/api/v1/teams/2", {"name": "B"}), "2")

        assert status == "400 Bad Request"
        assert body == ""

    def test_delete_team_returns_plain_text(self, controller, mock_command_service, make_environ):
        """팀 삭제는 항상 200과 확인 문구(text/plain)를 반환합니다."""
        status, body, content_type = controller.delete_team(make_environ("DELETE", "/api/v1/teams/2"), "2")

        assert status == "200 OK"
        assert body == "Team deleted successfully"
        assert content_type.startswith("text/plain")
        mock_command_service.delete_team.assert_called_once_with(DeleteTeamCommand(2))
