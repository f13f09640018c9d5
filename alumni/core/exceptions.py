from fastapi import HTTPException, status


class AlumniException(HTTPException):
    """Base for every error the service reports to clients as {success: false, message}."""


class UserAlreadyExistsException(AlumniException):
    def __init__(self, field: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"An account with this {field} already exists."
        )


class InvalidCredentialsException(AlumniException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password.",
            headers={"WWW-Authenticate": "Bearer"},
        )


class AccountUnverifiedException(AlumniException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Account pending verification. Please wait for admin approval.",
            headers={"WWW-Authenticate": "Bearer"},
        )


class NotAuthenticatedException(AlumniException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token provided.",
            headers={"WWW-Authenticate": "Bearer"},
        )


class TokenExpiredException(AlumniException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has expired.",
            headers={"WWW-Authenticate": "Bearer"},
        )


class TokenInvalidException(AlumniException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token is invalid.",
            headers={"WWW-Authenticate": "Bearer"},
        )


class ForbiddenException(AlumniException):
    def __init__(self, resource: str = "resource"):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"This {resource} does not belong to the current user."
        )


class AdminRequiredException(AlumniException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required."
        )


class NotFoundException(AlumniException):
    def __init__(self, resource: str = "resource"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{resource.capitalize()} not found."
        )


class AccountAlreadyVerifiedException(AlumniException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only pending accounts can be rejected."
        )


class StoreFailureException(AlumniException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Database error."
        )


class MailDeliveryException(AlumniException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to send email."
        )


class AttachmentTooLargeException(AlumniException):
    def __init__(self, limit_bytes: int):
        super().__init__(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Attachment exceeds the {limit_bytes // (1024 * 1024) or 1} MB limit."
        )
