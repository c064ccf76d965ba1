"""
Registro de tipos de campo.

Es el único punto de extensión: agregar un tipo de campo nuevo consiste
en definir su FieldTypeDescriptor y registrarlo. El registro se llena una
vez al iniciar y luego solo se consulta, por lo que puede compartirse
entre sesiones sin sincronización.
"""

from typing import Iterable, Iterator, Optional

from formbuilder.errors import DuplicateFieldType, UnknownFieldType
from formbuilder.fields.base import FieldGroup, FieldTypeDescriptor
from formbuilder.models.field import tag_value


class FieldRegistry:
    """Mapeo tag -> descriptor."""

    def __init__(self, descriptors: Iterable[FieldTypeDescriptor] = ()):
        self._descriptors: dict[str, FieldTypeDescriptor] = {}
        for descriptor in descriptors:
            self.register(descriptor)

    def register(self, descriptor: FieldTypeDescriptor) -> FieldTypeDescriptor:
        """
        Registra un descriptor.

        Raises:
            DuplicateFieldType: Si el tag ya estaba registrado
        """
        if descriptor.tag in self._descriptors:
            raise DuplicateFieldType(descriptor.tag)
        self._descriptors[descriptor.tag] = descriptor
        return descriptor

    def resolve(self, tag) -> FieldTypeDescriptor:
        """
        Obtiene el descriptor de un tag.

        Raises:
            UnknownFieldType: Si el tag no está registrado
        """
        key = tag_value(tag)
        try:
            return self._descriptors[key]
        except KeyError:
            raise UnknownFieldType(key) from None

    def tags(self) -> list[str]:
        """Tags registrados en orden de registro."""
        return list(self._descriptors)

    def by_group(self, group: FieldGroup) -> list[FieldTypeDescriptor]:
        """Descriptores de un grupo de la paleta."""
        return [d for d in self._descriptors.values() if d.group == group]

    def __contains__(self, tag) -> bool:
        return tag_value(tag) in self._descriptors

    def __iter__(self) -> Iterator[FieldTypeDescriptor]:
        return iter(self._descriptors.values())

    def __len__(self) -> int:
        return len(self._descriptors)


def builtin_descriptors() -> list[FieldTypeDescriptor]:
    """Descriptores incluidos, en el orden de la paleta."""
    from formbuilder.fields.checkbox import CHECKBOX_FIELD
    from formbuilder.fields.date import DATE_FIELD
    from formbuilder.fields.number import NUMBER_FIELD
    from formbuilder.fields.paragraph import PARAGRAPH_FIELD
    from formbuilder.fields.select import SELECT_FIELD
    from formbuilder.fields.separator import SEPARATOR_FIELD
    from formbuilder.fields.spacer import SPACER_FIELD
    from formbuilder.fields.subtitle import SUBTITLE_FIELD
    from formbuilder.fields.text import TEXT_FIELD
    from formbuilder.fields.textarea import TEXTAREA_FIELD
    from formbuilder.fields.title import TITLE_FIELD

    return [
        # Diseño
        TITLE_FIELD,
        SUBTITLE_FIELD,
        PARAGRAPH_FIELD,
        SEPARATOR_FIELD,
        SPACER_FIELD,
        # Entrada
        TEXT_FIELD,
        NUMBER_FIELD,
        TEXTAREA_FIELD,
        DATE_FIELD,
        SELECT_FIELD,
        CHECKBOX_FIELD,
    ]


def build_default_registry() -> FieldRegistry:
    """Crea un registro con todos los tipos incluidos."""
    return FieldRegistry(builtin_descriptors())


_registry: Optional[FieldRegistry] = None


def get_registry() -> FieldRegistry:
    """Obtiene el registro global (singleton)."""
    global _registry
    if _registry is None:
        _registry = build_default_registry()
    return _registry
