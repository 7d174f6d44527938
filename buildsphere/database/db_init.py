from datetime import date

from .database import engine, SessionLocal, Base
from .models import Project, Team, Material, Machine
from buildsphere.repositories.sqlalchemy.sqlalchemy_project_repository import SqlalchemyProjectRepository
from buildsphere.repositories.sqlalchemy.sqlalchemy_team_repository import SqlalchemyTeamRepository
from buildsphere.repositories.sqlalchemy.sqlalchemy_material_repository import SqlalchemyMaterialRepository
from buildsphere.repositories.sqlalchemy.sqlalchemy_machine_repository import SqlalchemyMachineRepository
from buildsphere.utils.logger_utils import logger

def initialize_db(bind=engine, session_factory=SessionLocal):
    """
    테이블을 생성하고, 비어있는 DB라면 데모 프로젝트 하나와
    그에 소속된 팀, 자재, 장비를 리포지토리를 통해 삽입합니다.
    """
    logger.info("Initializing database schema...")
    Base.metadata.create_all(bind=bind)

    db = session_factory()
    try:
        project_repo = SqlalchemyProjectRepository(db)
        if project_repo.list_all():
            logger.info("Seed data already present, skipping.")
            return

        project = project_repo.create(Project(
            name='Torre Central',
            description='Edificio de oficinas de 12 pisos',
            location='Lima, Peru',
            start_date=date(2024, 3, 1),
            expected_end_date=date(2025, 9, 30),
            budget=2500000.0,
            url_image='https://example.com/images/torre-central.png',
            owner_user_id=1,
        ))

        team_repo = SqlalchemyTeamRepository(db)
        team_repo.create(Team(project_id=project.id, name='Estructuras', description='Concreto y acero'))
        team_repo.create(Team(project_id=project.id, name='Instalaciones', description='Electricas y sanitarias'))

        material_repo = SqlalchemyMaterialRepository(db)
        material_repo.create(Material(project_id=project.id, name='Cemento Portland', quantity=1200, unit='bolsas'))
        material_repo.create(Material(project_id=project.id, name='Acero corrugado', quantity=35.5, unit='toneladas'))

        machine_repo = SqlalchemyMachineRepository(db)
        machine_repo.create(Machine(project_id=project.id, name='Excavadora', brand='Caterpillar', status='IN_USE'))
        machine_repo.create(Machine(project_id=project.id, name='Grua torre', brand='Liebherr'))

        logger.info(f"Seed data inserted for project {project.id}.")

    except Exception:
        db.rollback()
        logger.exception("Database initialization failed.")
        raise
    finally:
        db.close()

if __name__ == '__main__':
    initialize_db()
