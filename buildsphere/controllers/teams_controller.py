from buildsphere.assemblers.team_assembler import (
    create_team_command_from_resource, update_team_command_from_resource, team_resource_from_entity
)
from buildsphere.controllers.http_utils import (
    get_request_data, json_response, empty_response, OK, CREATED, BAD_REQUEST, NOT_FOUND, TEXT
)
from buildsphere.domain.commands import DeleteTeamCommand
from buildsphere.domain.queries import GetTeamByIdQuery, GetAllTeamsByProjectIdQuery
from buildsphere.domain.valueobjects import ProjectRef
from buildsphere.resources.team import CreateTeamResource, UpdateTeamResource
from buildsphere.services.team_command_service import TeamCommandService
from buildsphere.services.team_query_service import TeamQueryService


class TeamsController:
    """/api/v1/teams 엔드포인트."""

    def __init__(self, team_command_service: TeamCommandService, team_query_service: TeamQueryService):
        self.team_command_service = team_command_service
        self.team_query_service = team_query_service

    def create_team(self, environ):
        resource = CreateTeamResource.model_validate(get_request_data(environ))
        team_id = self.team_command_service.create_team(create_team_command_from_resource(resource))
        if team_id is None:
            return empty_response(BAD_REQUEST)
        # 응답은 저장된 상태를 다시 조회해서 만든다
        team = self.team_query_service.get_team_by_id(GetTeamByIdQuery(team_id))
        if team is None:
            return empty_response(BAD_REQUEST)
        return json_response(CREATED, team_resource_from_entity(team).to_json_dict())

    def get_team(self, environ, team_id):
        team = self.team_query_service.get_team_by_id(GetTeamByIdQuery(int(team_id)))
        if team is None:
            return empty_response(NOT_FOUND)
        return json_response(OK, team_resource_from_entity(team).to_json_dict())

    def get_all_teams_by_project_id(self, environ, project_id):
        query = GetAllTeamsByProjectIdQuery(ProjectRef(int(project_id)))
        teams = self.team_query_service.get_all_teams_by_project_id(query)
        return json_response(OK, [team_resource_from_entity(t).to_json_dict() for t in teams])

    def update_team(self, environ, team_id):
        resource = UpdateTeamResource.model_validate(get_request_data(environ))
        team = self.team_command_service.update_team(update_team_command_from_resource(int(team_id), resource))
        if team is None:
            return empty_response(BAD_REQUEST)
        return json_response(OK, team_resource_from_entity(team).to_json_dict())

    def delete_team(self, environ, team_id):
        self.team_command_service.delete_team(DeleteTeamCommand(int(team_id)))
        return OK, "Team deleted successfully", TEXT
