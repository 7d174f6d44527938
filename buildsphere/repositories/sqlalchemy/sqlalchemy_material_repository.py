from typing import List
from sqlalchemy.orm import Session
from buildsphere.database import models
from buildsphere.repositories.interfaces import IMaterialRepository
from buildsphere.repositories.sqlalchemy.sql_bounds import fits_sql_integer

class SqlalchemyMaterialRepository(IMaterialRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def create(self, material_model: models.Material) -> models.Material:
        self.db.add(material_model)
        self.db.commit()
        self.db.refresh(material_model)
        return material_model

    def list_by_project_id(self, project_id: int) -> List[models.Material]:
        if not fits_sql_integer(project_id):
            return []
        return self.db.query(models.Material).filter(models.Material.project_id == project_id).order_by(models.Material.id.asc()).all()
