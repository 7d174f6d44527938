# buildsphere/app.py
from wsgiref.simple_server import make_server
import json
import re

from pydantic import ValidationError

from buildsphere.config import server_config
from buildsphere.database.database import SessionLocal, engine, Base
from buildsphere.repositories.sqlalchemy.sqlalchemy_project_repository import SqlalchemyProjectRepository
from buildsphere.repositories.sqlalchemy.sqlalchemy_team_repository import SqlalchemyTeamRepository
from buildsphere.repositories.sqlalchemy.sqlalchemy_material_repository import SqlalchemyMaterialRepository
from buildsphere.repositories.sqlalchemy.sqlalchemy_machine_repository import SqlalchemyMachineRepository
from buildsphere.services.project_command_service import ProjectCommandService
from buildsphere.services.project_query_service import ProjectQueryService
from buildsphere.services.team_command_service import TeamCommandService
from buildsphere.services.team_query_service import TeamQueryService
from buildsphere.services.material_query_service import MaterialQueryService
from buildsphere.services.machine_query_service import MachineQueryService
from buildsphere.services.exceptions import InvalidRequestBodyError
from buildsphere.controllers.http_utils import JSON
from buildsphere.controllers.teams_controller import TeamsController
from buildsphere.controllers.projects_controller import ProjectsController
from buildsphere.utils.logger_utils import logger

API_PREFIX = "/api/v1"

# (method, path pattern, controller name, handler name)
ROUTES = [
    ('POST', r'^/teams$', 'teams', 'create_team'),
    ('GET', r'^/teams/([0-9]+)$', 'teams', 'get_team'),
    ('GET', r'^/teams/projectId/([0-9]+)$', 'teams', 'get_all_teams_by_project_id'),
    ('PUT', r'^/teams/([0-9]+)$', 'teams', 'update_team'),
    ('DELETE', r'^/teams/([0-9]+)$', 'teams', 'delete_team'),
    ('POST', r'^/projects$', 'projects', 'create_project'),
    ('GET', r'^/projects$', 'projects', 'get_all_projects'),
    ('GET', r'^/projects/([0-9]+)$', 'projects', 'get_project_by_id'),
    ('PUT', r'^/projects/([0-9]+)$', 'projects', 'update_project'),
    ('DELETE', r'^/projects/([0-9]+)$', 'projects', 'delete_project'),
    ('GET', r'^/projects/([0-9]+)/materials$', 'projects', 'get_all_materials_by_project_id'),
    ('GET', r'^/projects/([0-9]+)/machines$', 'projects', 'get_all_machines_by_project_id'),
]

# --------------------------------------------------------------------------
## 예외 -> HTTP 상태 매핑
# --------------------------------------------------------------------------

def handle_exception(e):
    error_map = [
        (InvalidRequestBodyError, "400 Bad Request"),
        (ValidationError, "400 Bad Request"),
    ]
    for error_type, status in error_map:
        if isinstance(e, error_type):
            return status, json.dumps({"error": _describe(e)})

    logger.opt(exception=e).error(f"Unhandled exception: {e}")
    return "500 Internal Server Error", json.dumps({"error": "Internal Server Error"})


def _describe(e):
    if isinstance(e, ValidationError):
        return [
            {"field": ".".join(str(loc) for loc in err["loc"]), "message": err["msg"]}
            for err in e.errors()
        ]
    return str(e)

# --------------------------------------------------------------------------
## 의존성 조립 및 라우팅
# --------------------------------------------------------------------------

def build_controllers(db_session):
    """요청마다 세션 하나를 공유하는 리포지토리 -> 서비스 -> 컨트롤러를 조립합니다."""
    project_repo = SqlalchemyProjectRepository(db_session)
    team_repo = SqlalchemyTeamRepository(db_session)
    material_repo = SqlalchemyMaterialRepository(db_session)
    machine_repo = SqlalchemyMachineRepository(db_session)

    return {
        'teams': TeamsController(
            TeamCommandService(team_repo, project_repo),
            TeamQueryService(team_repo),
        ),
        'projects': ProjectsController(
            ProjectCommandService(project_repo),
            ProjectQueryService(project_repo),
            MaterialQueryService(material_repo),
            MachineQueryService(machine_repo),
        ),
    }


def resolve_route(method, path):
    if not path.startswith(API_PREFIX):
        return None, None, ()
    sub_path = path[len(API_PREFIX):]
    for route_method, pattern, controller_name, handler_name in ROUTES:
        if method == route_method and (match := re.match(pattern, sub_path)):
            return controller_name, handler_name, match.groups()
    return None, None, ()


def create_app(session_factory):
    """주어진 세션 팩토리를 사용하는 WSGI 애플리케이션을 만듭니다."""

    def application(environ, start_response):
        path = environ.get("PATH_INFO", "")
        method = environ.get("REQUEST_METHOD", "")
        content_type = JSON

        db_session = session_factory()
        try:
            controller_name, handler_name, path_args = resolve_route(method, path)
            if handler_name:
                controller = build_controllers(db_session)[controller_name]
                status, response_body, content_type = getattr(controller, handler_name)(environ, *path_args)
            else:
                status, response_body = '404 Not Found', json.dumps({'error': 'Not Found'})
        except Exception as e:
            status, response_body = handle_exception(e)
        finally:
            db_session.close()

        logger.info(f"{method} {path} -> {status}")
        headers = [("Content-Type", content_type)] if content_type else []
        start_response(status, headers)
        return [response_body.encode("utf-8")] if response_body else []

    return application


application = create_app(SessionLocal)

# --------------------------------------------------------------------------
## 서버 실행
# --------------------------------------------------------------------------

if __name__ == "__main__":
    Base.metadata.create_all(bind=engine)
    host, port = server_config["HOST"], server_config["PORT"]
    with make_server(host, port, application) as httpd:
        logger.info(f"Serving BuildSphere API on port {port}...")
        httpd.serve_forever()
