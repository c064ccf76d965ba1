"""
Motor del diseñador de formularios.

DesignerSession mantiene en memoria la definición que se está editando,
el campo seleccionado y la marca de cambios sin guardar. Hay una sesión
por vista de diseño abierta; no se comparte entre vistas.

Solo add_instance, remove_instance y move_instance cambian el conjunto
o el orden de los IDs. update_configuration nunca cambia ID ni tipo.
"""

import logging
from typing import Any, Iterable, Mapping, Optional

from formbuilder import definition as codec
from formbuilder.errors import InstanceNotFound, InvalidConfiguration
from formbuilder.fields.registry import FieldRegistry, get_registry
from formbuilder.models.base import generate_id
from formbuilder.models.field import FieldConfiguration, FieldInstance

logger = logging.getLogger(__name__)


def clamp(index: int, upper: int) -> int:
    """Limita un índice al rango [0, upper]."""
    return max(0, min(index, upper))


class DesignerSession:
    """Estado de una sesión de diseño."""

    def __init__(
        self,
        instances: Optional[Iterable[FieldInstance]] = None,
        registry: Optional[FieldRegistry] = None,
    ):
        """
        Inicializa la sesión.

        Args:
            instances: Definición inicial (se copia)
            registry: Registro de tipos. Default: registro global
        """
        self.registry = registry or get_registry()
        self._instances: list[FieldInstance] = []
        self.selected_id: Optional[str] = None
        self.dirty = False
        if instances is not None:
            self.load(instances)

    # ========================================================================
    # Consultas
    # ========================================================================

    @property
    def instances(self) -> tuple[FieldInstance, ...]:
        """Campos en orden (solo lectura)."""
        return tuple(self._instances)

    @property
    def selected(self) -> Optional[FieldInstance]:
        """Campo seleccionado, si existe en la definición."""
        if self.selected_id is None:
            return None
        index = self._find(self.selected_id)
        return self._instances[index] if index is not None else None

    def __len__(self) -> int:
        return len(self._instances)

    def ids(self) -> list[str]:
        return [instance.id for instance in self._instances]

    def index_of(self, instance_id: str) -> int:
        """Posición de un campo (InstanceNotFound si no existe)."""
        index = self._find(instance_id)
        if index is None:
            raise InstanceNotFound(instance_id)
        return index

    def get_instance(self, instance_id: str) -> FieldInstance:
        """Obtiene un campo por ID (InstanceNotFound si no existe)."""
        return self._instances[self.index_of(instance_id)]

    def _find(self, instance_id: str) -> Optional[int]:
        for i, instance in enumerate(self._instances):
            if instance.id == instance_id:
                return i
        return None

    def _new_id(self) -> str:
        existing = set(self.ids())
        new_id = generate_id()
        while new_id in existing:
            new_id = generate_id()
        return new_id

    # ========================================================================
    # Operaciones de edición
    # ========================================================================

    def add_instance(self, tag, at_index: Optional[int] = None) -> FieldInstance:
        """
        Crea un campo nuevo y lo inserta en la posición indicada.

        Args:
            tag: Tipo de campo
            at_index: Posición (se limita a [0, len]). None = al final

        Returns:
            Campo creado (queda seleccionado)

        Raises:
            UnknownFieldType: Si el tipo no está registrado
        """
        descriptor = self.registry.resolve(tag)
        instance = descriptor.construct(self._new_id())

        index = len(self._instances) if at_index is None else clamp(at_index, len(self._instances))
        self._instances.insert(index, instance)
        self.selected_id = instance.id
        self.dirty = True

        logger.debug("Campo %s (%s) agregado en posición %d", instance.id, instance.tag, index)
        return instance

    def remove_instance(self, instance_id: str) -> FieldInstance:
        """
        Elimina un campo.

        Raises:
            InstanceNotFound: Si no existe
        """
        index = self.index_of(instance_id)
        instance = self._instances.pop(index)
        if self.selected_id == instance_id:
            self.selected_id = None
        self.dirty = True

        logger.debug("Campo %s eliminado", instance_id)
        return instance

    def move_instance(self, instance_id: str, to_index: int) -> int:
        """
        Mueve un campo a otra posición manteniendo el orden relativo del resto.

        Args:
            instance_id: Campo a mover
            to_index: Posición final (se limita a [0, len-1])

        Returns:
            Posición final del campo

        Raises:
            InstanceNotFound: Si no existe
        """
        index = self.index_of(instance_id)
        instance = self._instances.pop(index)
        target = clamp(to_index, len(self._instances))
        self._instances.insert(target, instance)
        self.dirty = True

        logger.debug("Campo %s movido de %d a %d", instance_id, index, target)
        return target

    def select(self, instance_id: Optional[str]) -> None:
        """Selecciona un campo (None deselecciona). No verifica que exista."""
        self.selected_id = instance_id

    def update_configuration(
        self,
        instance_id: str,
        new_configuration: Any,
    ) -> FieldInstance:
        """
        Reemplaza la configuración de un campo.

        La configuración se valida antes de modificar nada: si es inválida
        el estado queda intacto.

        Args:
            instance_id: Campo a modificar
            new_configuration: Modelo o mapping con la configuración completa.
                Las claves omitidas toman el valor por defecto del tipo.

        Raises:
            InstanceNotFound: Si no existe
            InvalidConfiguration: Si no cumple el esquema del tipo
        """
        instance = self.get_instance(instance_id)
        descriptor = self.registry.resolve(instance.tag)
        configuration = descriptor.validate_configuration(new_configuration)
        if configuration == instance.configuration:
            return instance

        instance.configuration = configuration
        self.dirty = True

        logger.debug("Configuración de %s actualizada", instance_id)
        return instance

    def patch_configuration(
        self,
        instance_id: str,
        changes: Mapping[str, Any],
    ) -> FieldInstance:
        """
        Actualiza solo algunas propiedades, conservando las demás.

        Raises:
            InstanceNotFound: Si no existe
            InvalidConfiguration: Si una clave no es propiedad del tipo
                o el resultado no cumple el esquema
        """
        instance = self.get_instance(instance_id)
        current: FieldConfiguration = instance.configuration
        merged = current.model_dump()
        unknown = []
        for key, value in changes.items():
            name = _field_name(current, key)
            if name is None:
                unknown.append(key)
            else:
                merged[name] = value
        if unknown:
            raise InvalidConfiguration(
                instance.tag,
                [{"loc": (key,), "msg": "propiedad desconocida"} for key in unknown],
            )
        return self.update_configuration(instance_id, merged)

    # ========================================================================
    # Serialización
    # ========================================================================

    def serialize(self) -> list[FieldInstance]:
        """Copia de la definición actual."""
        return [instance.copy() for instance in self._instances]

    def load(self, instances: Iterable[FieldInstance]) -> None:
        """
        Reemplaza la definición (p.ej. al abrir un formulario guardado).

        Quita la selección y limpia la marca de cambios.

        Raises:
            InvalidDefinition: Si hay IDs repetidos
        """
        loaded = [instance.copy() for instance in instances]
        codec.ensure_unique_ids(loaded)
        self._instances = loaded
        self.selected_id = None
        self.dirty = False

    def to_json(self) -> str:
        """Definición serializada como texto JSON."""
        return codec.dumps(self._instances)

    @classmethod
    def from_json(cls, text: str, registry: Optional[FieldRegistry] = None) -> "DesignerSession":
        """Crea una sesión a partir de una definición guardada."""
        registry = registry or get_registry()
        return cls(codec.loads(text, registry), registry=registry)

    def mark_saved(self) -> None:
        """Indica que la definición actual fue persistida."""
        self.dirty = False


def _field_name(configuration: FieldConfiguration, key: str) -> Optional[str]:
    """Traduce un alias camelCase al nombre del atributo (None si no existe)."""
    fields = type(configuration).model_fields
    if key in fields:
        return key
    for name, info in fields.items():
        if info.alias == key:
            return name
    return None
