from typing import List
from sqlalchemy.orm import Session
from buildsphere.database import models
from buildsphere.repositories.interfaces import IMachineRepository
from buildsphere.repositories.sqlalchemy.sql_bounds import fits_sql_integer

class SqlalchemyMachineRepository(IMachineRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def create(self, machine_model: models.Machine) -> models.Machine:
        self.db.add(machine_model)
        self.db.commit()
        self.db.refresh(machine_model)
        return machine_model

    def list_by_project_id(self, project_id: int) -> List[models.Machine]:
        if not fits_sql_integer(project_id):
            return []
        return self.db.query(models.Machine).filter(models.Machine.project_id == project_id).order_by(models.Machine.id.asc()).all()
