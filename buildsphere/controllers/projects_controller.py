from buildsphere.assemblers.project_assembler import (
    create_project_command_from_resource, update_project_command_from_resource, project_resource_from_dashboard
)
from buildsphere.assemblers.resource_assembler import material_resource_from_entity, machine_resource_from_entity
from buildsphere.controllers.http_utils import (
    get_request_data, json_response, empty_response, OK, CREATED, NO_CONTENT, BAD_REQUEST, NOT_FOUND
)
from buildsphere.domain.commands import DeleteProjectCommand
from buildsphere.domain.queries import (
    GetAllProjectsQuery, GetProjectByIdQuery, GetAllMaterialsByProjectIdQuery, GetAllMachinesByProjectIdQuery
)
from buildsphere.domain.valueobjects import ProjectRef
from buildsphere.resources.project import CreateProjectResource
from buildsphere.services.project_command_service import ProjectCommandService
from buildsphere.services.project_query_service import ProjectQueryService
from buildsphere.services.material_query_service import MaterialQueryService
from buildsphere.services.machine_query_service import MachineQueryService


class ProjectsController:
    """/api/v1/projects 엔드포인트. 프로젝트 범위의 자재/장비 조회도 담당합니다."""

    def __init__(
        self,
        project_command_service: ProjectCommandService,
        project_query_service: ProjectQueryService,
        material_query_service: MaterialQueryService,
        machine_query_service: MachineQueryService,
    ):
        self.project_command_service = project_command_service
        self.project_query_service = project_query_service
        self.material_query_service = material_query_service
        self.machine_query_service = machine_query_service

    def create_project(self, environ):
        resource = CreateProjectResource.model_validate(get_request_data(environ))
        dashboard = self.project_command_service.create_project(create_project_command_from_resource(resource))
        if dashboard is None:
            return empty_response(BAD_REQUEST)
        return json_response(CREATED, project_resource_from_dashboard(dashboard).to_json_dict())

    def update_project(self, environ, project_id):
        resource = CreateProjectResource.model_validate(get_request_data(environ))
        command = update_project_command_from_resource(int(project_id), resource)
        dashboard = self.project_command_service.update_project(command)
        if dashboard is None:
            return empty_response(BAD_REQUEST)
        return json_response(OK, project_resource_from_dashboard(dashboard).to_json_dict())

    def delete_project(self, environ, project_id):
        self.project_command_service.delete_project(DeleteProjectCommand(int(project_id)))
        return empty_response(NO_CONTENT)

    def get_all_projects(self, environ):
        dashboards = self.project_query_service.get_all_projects(GetAllProjectsQuery())
        return json_response(OK, [project_resource_from_dashboard(d).to_json_dict() for d in dashboards])

    def get_project_by_id(self, environ, project_id):
        dashboard = self.project_query_service.get_project_by_id(GetProjectByIdQuery(int(project_id)))
        if dashboard is None:
            return empty_response(NOT_FOUND)
        return json_response(OK, project_resource_from_dashboard(dashboard).to_json_dict())

    def get_all_materials_by_project_id(self, environ, project_id):
        query = GetAllMaterialsByProjectIdQuery(ProjectRef(int(project_id)))
        materials = self.material_query_service.get_all_materials_by_project_id(query)
        return json_response(OK, [material_resource_from_entity(m).to_json_dict() for m in materials])

    def get_all_machines_by_project_id(self, environ, project_id):
        query = GetAllMachinesByProjectIdQuery(ProjectRef(int(project_id)))
        machines = self.machine_query_service.get_all_machines_by_project_id(query)
        return json_response(OK, [machine_resource_from_entity(m).to_json_dict() for m in machines])
