"""
Tests para el registro de tipos de campo.
"""

import pytest

from formbuilder.errors import DuplicateFieldType, UnknownFieldType
from formbuilder.fields import (
    FieldGroup,
    FieldRegistry,
    FieldTypeDescriptor,
    builtin_descriptors,
    get_registry,
)
from formbuilder.fields.text import TEXT_FIELD
from formbuilder.models import FieldConfiguration, FieldTag


class TestFieldRegistry:
    """Tests para FieldRegistry."""

    def test_builtin_tags(self, registry):
        """El registro incluye los once tipos."""
        assert len(registry) == 11
        assert set(registry.tags()) == {tag.value for tag in FieldTag}

    def test_palette_order(self, registry):
        """Los campos de diseño van antes que los de entrada."""
        groups = [d.group for d in registry]
        first_input = groups.index(FieldGroup.INPUT)
        assert all(g == FieldGroup.INPUT for g in groups[first_input:])

    def test_resolve_by_string_and_enum(self, registry):
        """resolve acepta el tag como string o enum."""
        assert registry.resolve("text") is registry.resolve(FieldTag.TEXT)

    def test_resolve_unknown(self, registry):
        """Un tag no registrado lanza UnknownFieldType."""
        with pytest.raises(UnknownFieldType) as exc:
            registry.resolve("signature")
        assert exc.value.tag == "signature"

    def test_register_duplicate(self, registry):
        """Registrar dos veces el mismo tag falla."""
        with pytest.raises(DuplicateFieldType):
            registry.register(TEXT_FIELD)

    def test_register_new_type(self):
        """Un tipo nuevo se agrega sin tocar el resto."""
        registry = FieldRegistry(builtin_descriptors())
        custom = FieldTypeDescriptor(
            tag="rating",
            label="Rating",
            group=FieldGroup.INPUT,
            configuration_schema=FieldConfiguration,
            design_preview=lambda instance: "*****",
            property_editor=lambda instance: [],
            fill_input=TEXT_FIELD.fill_input,
            validate_value=lambda instance, value: True,
        )
        registry.register(custom)

        assert "rating" in registry
        assert registry.resolve("rating") is custom
        assert len(registry) == 12

    def test_by_group(self, registry):
        """by_group filtra por grupo de la paleta."""
        layout = {d.tag for d in registry.by_group(FieldGroup.LAYOUT)}
        assert layout == {"title", "subtitle", "paragraph", "separator", "spacer"}

    def test_global_registry_singleton(self):
        """get_registry devuelve siempre la misma instancia."""
        assert get_registry() is get_registry()


class TestFieldTypeDescriptor:
    """Tests para FieldTypeDescriptor."""

    def test_rejects_non_callable(self):
        """Los renders deben ser invocables."""
        with pytest.raises(TypeError):
            FieldTypeDescriptor(
                tag="broken",
                label="Broken",
                group=FieldGroup.LAYOUT,
                configuration_schema=FieldConfiguration,
                design_preview=None,
                property_editor=lambda i: [],
                fill_input=lambda i: None,
                validate_value=lambda i, v: True,
            )

    def test_rejects_bad_schema(self):
        """El esquema debe ser un FieldConfiguration."""
        with pytest.raises(TypeError):
            FieldTypeDescriptor(
                tag="broken",
                label="Broken",
                group=FieldGroup.LAYOUT,
                configuration_schema=dict,
                design_preview=lambda i: "",
                property_editor=lambda i: [],
                fill_input=lambda i: None,
                validate_value=lambda i, v: True,
            )

    def test_construct_uses_defaults(self, registry):
        """construct crea una instancia con la configuración por defecto."""
        instance = registry.resolve("text").construct("abc12345")
        assert instance.id == "abc12345"
        assert instance.tag == "text"
        assert instance.configuration.label == "Text field"
        assert instance.configuration.required is False
