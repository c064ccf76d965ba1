"""
Serialización de definiciones de formulario.

Formato persistido: arreglo JSON ordenado de objetos
{"id": str, "type": tag, "extraAttributes": {...}}.
"""

import json
from typing import Any, Iterable, Optional

from formbuilder.errors import InvalidDefinition
from formbuilder.fields.registry import FieldRegistry, get_registry
from formbuilder.models.field import FieldInstance


def ensure_unique_ids(instances: Iterable[FieldInstance]) -> None:
    """Verifica que no haya IDs repetidos (InvalidDefinition si los hay)."""
    seen: set[str] = set()
    for instance in instances:
        if instance.id in seen:
            raise InvalidDefinition(f"ID de campo repetido: {instance.id}")
        seen.add(instance.id)


def definition_to_data(instances: Iterable[FieldInstance]) -> list[dict]:
    """Convierte la definición a estructuras JSON-serializables."""
    return [instance.to_dict() for instance in instances]


def definition_from_data(
    data: Any,
    registry: Optional[FieldRegistry] = None,
) -> list[FieldInstance]:
    """
    Reconstruye una definición desde su forma serializada.

    Cada configuración se valida contra el esquema de su tipo.

    Raises:
        InvalidDefinition: Estructura inválida o IDs repetidos
        UnknownFieldType: Tipo no registrado
        InvalidConfiguration: Configuración que no cumple el esquema
    """
    registry = registry or get_registry()

    if not isinstance(data, list):
        raise InvalidDefinition("La definición debe ser un arreglo")

    instances = []
    for position, item in enumerate(data):
        if not isinstance(item, dict) or "id" not in item or "type" not in item:
            raise InvalidDefinition(f"Elemento {position} sin 'id' o 'type'")
        descriptor = registry.resolve(item["type"])
        configuration = descriptor.validate_configuration(item.get("extraAttributes") or {})
        instances.append(
            FieldInstance(id=str(item["id"]), tag=descriptor.tag, configuration=configuration)
        )

    ensure_unique_ids(instances)
    return instances


def dumps(instances: Iterable[FieldInstance]) -> str:
    """Serializa la definición a texto JSON."""
    return json.dumps(definition_to_data(instances), ensure_ascii=False)


def loads(text: Optional[str], registry: Optional[FieldRegistry] = None) -> list[FieldInstance]:
    """Deserializa una definición desde texto JSON (vacío = sin campos)."""
    if not text:
        return []
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidDefinition(f"JSON inválido: {e}") from e
    return definition_from_data(data, registry)
