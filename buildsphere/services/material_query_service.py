from typing import List

from buildsphere.database import models
from buildsphere.domain.queries import GetAllMaterialsByProjectIdQuery
from buildsphere.repositories.interfaces import IMaterialRepository


class MaterialQueryService:
    def __init__(self, material_repo: IMaterialRepository):
        self.material_repo = material_repo

    def get_all_materials_by_project_id(self, query: GetAllMaterialsByProjectIdQuery) -> List[models.Material]:
        return self.material_repo.list_by_project_id(query.project.project_id)
