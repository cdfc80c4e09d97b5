"""Error types raised by the services and rendered by the API layer.

Each error knows the HTTP status it maps to, so routers never have to
translate them by hand. The payload shape is ``{"message": ..., "error": ...}``
where ``error`` carries the underlying cause, when there is one.
"""

from typing import Optional


class InventoryError(Exception):
    status_code = 500

    def __init__(self, message: str, error: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error = error

    def to_dict(self) -> dict:
        payload = {"message": self.message}
        if self.error:
            payload["error"] = self.error
        return payload


class ValidationError(InventoryError):
    status_code = 400


class NotFoundError(InventoryError):
    status_code = 404

    def __init__(self, entity: str, status_code: Optional[int] = None):
        super().__init__("{} not found.".format(entity))
        self.entity = entity
        if status_code is not None:
            self.status_code = status_code


class InsufficientStockError(InventoryError):
    status_code = 400

    def __init__(self, available: int):
        super().__init__(
            "Insufficient stock. Only {} units available.".format(available)
        )
        self.available = available


class TransactionFailure(InventoryError):
    status_code = 500


class PersistenceError(InventoryError):
    status_code = 500


__all__ = [
    "InsufficientStockError",
    "InventoryError",
    "NotFoundError",
    "PersistenceError",
    "TransactionFailure",
    "ValidationError",
]
