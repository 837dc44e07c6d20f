"""Custom exceptions for the application."""

from fastapi import status


class ApplicationError(Exception):
    """Base exception for application errors.

    ``message`` is shown to the client, ``detail`` carries an optional
    diagnostic string (usually the driver or OS error text).
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str,
        detail: str | None = None,
        status_code: int | None = None,
    ):
        self.message = message
        self.detail = detail
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(ApplicationError):
    """Raised when a required field is missing or empty."""

    status_code = status.HTTP_400_BAD_REQUEST


class DuplicateEmailError(ApplicationError):
    """Raised when registering an email that already has an account."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, email: str, detail: str | None = None):
        self.email = email
        super().__init__("El correo electrónico ya está en uso.", detail)


class InvalidCredentialsError(ApplicationError):
    """Raised when no account matches the supplied credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Credenciales incorrectas."):
        super().__init__(message)


class UnsupportedFileTypeError(ApplicationError):
    """Raised when an upload has a media type other than the accepted ones."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, content_type: str | None):
        self.content_type = content_type
        super().__init__(
            "Solo se permiten archivos PDF",
            f"Unsupported media type: {content_type}",
        )


class FileTooLargeError(ApplicationError):
    """Raised when an upload exceeds the configured size limit."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__("Error al subir el archivo", f"File too large (limit {limit} bytes)")


class NotFoundError(ApplicationError):
    """Raised when a record lookup by id matches nothing."""

    status_code = status.HTTP_404_NOT_FOUND


class StorageError(ApplicationError):
    """Raised when the database or filesystem rejects an operation."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
