# 자재/장비는 이 API에서 조회 전용이므로 엔티티 -> 리소스 방향만 존재합니다.
from buildsphere.database import models
from buildsphere.resources.material import MaterialResource
from buildsphere.resources.machine import MachineResource


def material_resource_from_entity(material: models.Material) -> MaterialResource:
    return MaterialResource(
        id=material.id,
        project_id=material.project_id,
        name=material.name,
        description=material.description,
        quantity=material.quantity,
        unit=material.unit,
    )


def machine_resource_from_entity(machine: models.Machine) -> MachineResource:
    return MachineResource(
        id=machine.id,
        project_id=machine.project_id,
        name=machine.name,
        description=machine.description,
        brand=machine.brand,
        status=machine.status,
    )
