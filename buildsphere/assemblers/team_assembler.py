from buildsphere.database import models
from buildsphere.domain.commands import CreateTeamCommand, UpdateTeamCommand
from buildsphere.resources.team import CreateTeamResource, UpdateTeamResource, TeamResource


def create_team_command_from_resource(resource: CreateTeamResource) -> CreateTeamCommand:
    return CreateTeamCommand(
        project_id=resource.project_id,
        name=resource.name,
        description=resource.description,
    )


def update_team_command_from_resource(team_id: int, resource: UpdateTeamResource) -> UpdateTeamCommand:
    return UpdateTeamCommand(
        team_id=team_id,
        name=resource.name,
        description=resource.description,
    )


def team_resource_from_entity(team: models.Team) -> TeamResource:
    return TeamResource(
        id=team.id,
        project_id=team.project_id,
        name=team.name,
        description=team.description,
    )
