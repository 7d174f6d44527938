from typing import List

from buildsphere.database import models
from buildsphere.domain.queries import GetAllMachinesByProjectIdQuery
from buildsphere.repositories.interfaces import IMachineRepository


class MachineQueryService:
    def __init__(self, machine_repo: IMachineRepository):
        self.machine_repo = machine_repo

    def get_all_machines_by_project_id(self, query: GetAllMachinesByProjectIdQuery) -> List[models.Machine]:
        return self.machine_repo.list_by_project_id(query.project.project_id)
