"""Validation errors raised when creating users.

Messages are user-facing and fixed; callers may match on them.
"""

MISSING_FIELDS_MESSAGE = "Nome, email e idade são obrigatórios."
UNDERAGE_MESSAGE = "O usuário deve ser maior de idade."
INVALID_AGE_MESSAGE = "A idade deve ser um número inteiro."
INVALID_TEXT_MESSAGE = "Nome e email devem ser textos."
INVALID_ADMIN_FLAG_MESSAGE = "O indicador de administrador deve ser verdadeiro ou falso."


class UserValidationError(ValueError):
    """Base class for rejected user creation requests."""


class MissingFieldsError(UserValidationError):
    """Name, email or age was not provided."""

    def __init__(self, message: str = MISSING_FIELDS_MESSAGE):
        super().__init__(message)


class UnderageError(UserValidationError):
    """User is younger than the configured adult age."""

    def __init__(self, message: str = UNDERAGE_MESSAGE):
        super().__init__(message)
