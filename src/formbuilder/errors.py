"""
Excepciones de FormBuilder.

Todas son condiciones locales y recuperables: la interfaz las captura
y las muestra al usuario sin terminar el proceso.
"""


class FormBuilderError(Exception):
    """Error base de FormBuilder."""


class UnknownFieldType(FormBuilderError):
    """El tipo de campo no está registrado."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"Tipo de campo desconocido: {tag}")


class DuplicateFieldType(FormBuilderError):
    """Ya existe un descriptor registrado para ese tipo de campo."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"Tipo de campo ya registrado: {tag}")


class InstanceNotFound(FormBuilderError):
    """No existe un campo con ese ID en la definición."""

    def __init__(self, instance_id: str):
        self.instance_id = instance_id
        super().__init__(f"Campo no encontrado: {instance_id}")


class InvalidConfiguration(FormBuilderError):
    """La configuración propuesta no cumple el esquema del tipo de campo."""

    def __init__(self, tag: str, errors: list[dict] | None = None):
        self.tag = tag
        self.errors = errors or []
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in e.get('loc', ()))}: {e.get('msg', '')}"
            for e in self.errors
        )
        message = f"Configuración inválida para '{tag}'"
        if details:
            message += f" ({details})"
        super().__init__(message)


class InvalidDefinition(FormBuilderError):
    """La definición serializada no se puede reconstruir."""


class FormNotValid(FormBuilderError):
    """El formulario tiene campos sin un valor aceptable."""

    def __init__(self, invalid_ids: list[str]):
        self.invalid_ids = list(invalid_ids)
        super().__init__(
            f"Formulario incompleto: {len(self.invalid_ids)} campo(s) con errores"
        )


# ============================================================================
# Errores de persistencia
# ============================================================================

class FormNotFound(FormBuilderError):
    """El formulario no existe (o no pertenece al usuario)."""

    def __init__(self, form_ref: str):
        self.form_ref = form_ref
        super().__init__(f"Formulario no encontrado: {form_ref}")


class FormNotPublished(FormBuilderError):
    """El formulario no está publicado y no acepta respuestas."""

    def __init__(self, form_ref: str):
        self.form_ref = form_ref
        super().__init__(f"El formulario '{form_ref}' no está publicado")


class FormAlreadyPublished(FormBuilderError):
    """El formulario ya fue publicado y no puede editarse."""

    def __init__(self, form_ref: str):
        self.form_ref = form_ref
        super().__init__(f"El formulario '{form_ref}' ya está publicado")


class Unauthorized(FormBuilderError):
    """No hay un usuario identificado para la operación."""

    def __init__(self, message: str = "Usuario no identificado"):
        super().__init__(message)


class FormNameTaken(FormBuilderError):
    """El usuario ya tiene un formulario con ese nombre."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Ya existe un formulario llamado '{name}'")
