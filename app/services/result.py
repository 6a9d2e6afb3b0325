from dataclasses import dataclass
from typing import Generic, Optional, TypeVar
import enum

T = TypeVar("T")


class UpdateStatus(str, enum.Enum):
    """Outcome of an update operation."""
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    REJECTED = "rejected"


@dataclass
class UpdateResult(Generic[T]):
    """
    Update outcome shared by every service.

    `value` is set on success, `reason` explains a rejection.
    """
    status: UpdateStatus
    value: Optional[T] = None
    reason: Optional[str] = None

    @classmethod
    def success(cls, value: T) -> "UpdateResult[T]":
        return cls(UpdateStatus.SUCCESS, value=value)

    @classmethod
    def not_found(cls) -> "UpdateResult[T]":
        return cls(UpdateStatus.NOT_FOUND)

    @classmethod
    def rejected(cls, reason: str) -> "UpdateResult[T]":
        return cls(UpdateStatus.REJECTED, reason=reason)

    @property
    def ok(self) -> bool:
        return self.status is UpdateStatus.SUCCESS
