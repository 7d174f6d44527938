from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from buildsphere.database import models
from buildsphere.repositories.interfaces import ITeamRepository
from buildsphere.repositories.sqlalchemy.sql_bounds import fits_sql_integer

class SqlalchemyTeamRepository(ITeamRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def create(self, team_model: models.Team) -> models.Team:
        self.db.add(team_model)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        self.db.refresh(team_model)
        return team_model

    def find_by_id(self, team_id: int) -> Optional[models.Team]:
        if not fits_sql_integer(team_id):
            return None
        return self.db.query(models.Team).filter(models.Team.id == team_id).first()

    def list_by_project_id(self, project_id: int) -> List[models.Team]:
        if not fits_sql_integer(project_id):
            return []
        return self.db.query(models.Team).filter(models.Team.project_id == project_id).order_by(models.Team.id.asc()).all()

    def update(self, team_model: models.Team) -> models.Team:
        self.db.commit()
        self.db.refresh(team_model)
        return team_model

    def delete(self, team: models.Team) -> bool:
        if team:
            self.db.delete(team)
            self.db.commit()
            return True
        return False
