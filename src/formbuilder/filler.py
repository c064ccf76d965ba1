"""
Motor de llenado y validación de formularios.

FillSession guarda los valores ingresados por quien responde y la
validez de cada campo. Se valida en cada cambio (no solo al enviar)
para poder mostrar errores por campo; un valor inválido se guarda
igual, junto con su estado, para que pueda corregirse.

build_submission_payload es el único punto de salida de los datos y
nunca produce una respuesta parcialmente válida.

Ciclo de vida de un campo:
    UNTOUCHED -> set_value -> VALID | INVALID -> set_value -> ...
"""

import json
import logging
from enum import Enum
from typing import Any, Iterable, Optional

from formbuilder.errors import FormNotValid, InstanceNotFound
from formbuilder.fields.base import FillWidget
from formbuilder.fields.registry import FieldRegistry, get_registry
from formbuilder.models.field import FieldInstance

logger = logging.getLogger(__name__)


class FieldState(Enum):
    """Estado de llenado de un campo."""
    UNTOUCHED = "untouched"
    VALID = "valid"
    INVALID = "invalid"


class FormState(Enum):
    """Estado del formulario completo."""
    INCOMPLETE = "incomplete"  # Al menos un campo no es válido
    READY = "ready"            # Todos válidos: se puede enviar


class FillSession:
    """Estado de una respuesta en curso."""

    def __init__(
        self,
        instances: Iterable[FieldInstance],
        registry: Optional[FieldRegistry] = None,
    ):
        self.registry = registry or get_registry()
        self._instances: list[FieldInstance] = list(instances)
        self._by_id: dict[str, FieldInstance] = {i.id: i for i in self._instances}
        self.values: dict[str, Any] = {}
        self.validity: dict[str, bool] = {}

    @property
    def instances(self) -> tuple[FieldInstance, ...]:
        return tuple(self._instances)

    def _instance(self, instance_id: str) -> FieldInstance:
        try:
            return self._by_id[instance_id]
        except KeyError:
            raise InstanceNotFound(instance_id) from None

    # ========================================================================
    # Valores
    # ========================================================================

    def set_value(self, instance_id: str, value: Any) -> bool:
        """
        Guarda un valor y su validez.

        Returns:
            True si el valor es aceptable para el campo

        Raises:
            InstanceNotFound: Si el campo no está en la definición
        """
        instance = self._instance(instance_id)
        descriptor = self.registry.resolve(instance.tag)
        valid = bool(descriptor.validate_value(instance, value))

        self.values[instance_id] = value
        self.validity[instance_id] = valid

        logger.debug("Valor de %s: %s", instance_id, "válido" if valid else "inválido")
        return valid

    def value_of(self, instance_id: str, default: Any = None) -> Any:
        """Valor ingresado para un campo (default si no tiene)."""
        self._instance(instance_id)
        return self.values.get(instance_id, default)

    # ========================================================================
    # Validez
    # ========================================================================

    def field_state(self, instance_id: str) -> FieldState:
        """Estado de un campo."""
        self._instance(instance_id)
        if instance_id not in self.validity:
            return FieldState.UNTOUCHED
        return FieldState.VALID if self.validity[instance_id] else FieldState.INVALID

    def _is_valid(self, instance: FieldInstance) -> bool:
        if instance.id in self.validity:
            return self.validity[instance.id]
        # Sin valor: solo los campos obligatorios bloquean
        return not instance.required

    def invalid_ids(self) -> list[str]:
        """IDs de campos que impiden el envío, en orden del formulario."""
        return [i.id for i in self._instances if not self._is_valid(i)]

    def is_form_valid(self) -> bool:
        """True si todos los campos son válidos."""
        return all(self._is_valid(i) for i in self._instances)

    @property
    def form_state(self) -> FormState:
        return FormState.READY if self.is_form_valid() else FormState.INCOMPLETE

    def validate_all(self) -> list[str]:
        """
        Valida todos los campos como al presionar "Enviar".

        Los campos obligatorios sin tocar quedan marcados como inválidos
        para que la interfaz los resalte.

        Returns:
            IDs de campos inválidos
        """
        for instance in self._instances:
            if instance.id not in self.validity and instance.required:
                self.validity[instance.id] = False
        return self.invalid_ids()

    # ========================================================================
    # Render y envío
    # ========================================================================

    def widget(self, instance_id: str) -> FillWidget:
        """Representación del campo con su valor y estado actuales."""
        instance = self._instance(instance_id)
        descriptor = self.registry.resolve(instance.tag)
        return descriptor.fill_input(
            instance,
            value=self.values.get(instance_id),
            invalid=self.field_state(instance_id) == FieldState.INVALID,
        )

    def build_submission_payload(self) -> dict[str, Any]:
        """
        Arma la respuesta final.

        Returns:
            Copia de los valores, limitada a los campos de la definición

        Raises:
            FormNotValid: Si algún campo no es válido
        """
        invalid = self.invalid_ids()
        if invalid:
            raise FormNotValid(invalid)
        return {
            instance.id: self.values[instance.id]
            for instance in self._instances
            if instance.id in self.values
        }

    def payload_json(self) -> str:
        """Respuesta final serializada como texto JSON."""
        return json.dumps(self.build_submission_payload(), ensure_ascii=False)
