# app/domain/errors.py


class DomainError(Exception):
    """Bazowy blad domeny, router mapuje status_code na odpowiedz HTTP."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(DomainError, ValueError):
    status_code = 400


class UnauthorizedError(DomainError):
    status_code = 401


class ForbiddenError(DomainError, PermissionError):
    status_code = 403


class NotFoundError(DomainError, LookupError):
    status_code = 404


class ConflictError(DomainError):
    status_code = 409


class CartConflictError(ConflictError):
    """Wyscig przy dodawaniu do koszyka - niesie aktualne podsumowanie."""

    def __init__(self, message: str, summary: dict):
        super().__init__(message)
        self.summary = summary
