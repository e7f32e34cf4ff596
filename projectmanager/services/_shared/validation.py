"""
Field-level validation results shared by the binding layer and services.

``BindingResult`` is what request binding produces: an ordered, append-only
list of rejections for one submitted form. ``ServiceResult`` is what a
service returns: either a value or the violations that prevented it. Services
read a ``BindingResult`` but never mutate it.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class FieldError:
    """
    A single rejection attached to a form field.

    :param field: Wire name of the rejected field (e.g. ``"logEmail"``).
    :type field: str
    :param code: Stable machine-readable code (e.g. ``"EMAIL-PRESENT"``).
    :type code: str
    :param message: Human-readable message safe to render next to the field.
    :type message: str
    """

    field: str
    code: str
    message: str

    def as_dict(self) -> dict[str, str]:
        return {"field": self.field, "code": self.code, "message": self.message}


@dataclass(slots=True)
class BindingResult:
    """
    Mutable accumulator of field errors produced while binding a request.

    :param errors: Rejections in the order they were recorded.
    :type errors: list[FieldError]
    """

    errors: list[FieldError] = field(default_factory=list)

    def has_errors(self) -> bool:
        return bool(self.errors)

    def reject_value(self, field: str, code: str, message: str) -> None:
        """Append a rejection for ``field``."""
        self.errors.append(FieldError(field=field, code=code, message=message))

    def extend(self, errors: Iterable[FieldError]) -> None:
        """Append rejections produced elsewhere (e.g. by a service)."""
        self.errors.extend(errors)

    def field_errors(self, field: str) -> list[FieldError]:
        return [err for err in self.errors if err.field == field]

    def __iter__(self) -> Iterator[FieldError]:
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)


@dataclass(frozen=True, slots=True)
class ServiceResult(Generic[T]):
    """
    Outcome of a service operation: a value, or the violations that blocked it.

    Exactly one side is populated. Use :meth:`success` and :meth:`failure`
    rather than the constructor.

    :param value: Result value when the operation succeeded.
    :type value: T | None
    :param errors: Ordered field-level violations when it did not.
    :type errors: tuple[FieldError, ...]
    """

    value: T | None = None
    errors: tuple[FieldError, ...] = ()

    @classmethod
    def success(cls, value: T) -> ServiceResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, *errors: FieldError) -> ServiceResult[T]:
        if not errors:
            raise ValueError("A failed result needs at least one FieldError.")
        return cls(errors=tuple(errors))

    @property
    def ok(self) -> bool:
        return not self.errors

    def unwrap(self) -> T:
        """Return the value, raising ``ValueError`` on a failed result."""
        if self.errors or self.value is None:
            raise ValueError(f"Result has no value: {[e.code for e in self.errors]}")
        return self.value

    def codes(self) -> list[str]:
        return [err.code for err in self.errors]
