"""The closed set of value types a preference can hold.

Scalars are plain Python ``bool``, ``int``, ``float`` and ``str``. Vectors
are small frozen pydantic models. Inside a group every value is kept in its
plain document form (vectors become lists), which is what the serializers
read and write; the typed accessors convert on the way in and out.
"""

from __future__ import annotations

import math
from typing import Annotated, Any, ClassVar, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1

I32 = Annotated[StrictInt, Field(ge=-(2**31), le=2**31 - 1)]
U32 = Annotated[StrictInt, Field(ge=0, le=2**32 - 1)]

# Plain document form of a single value.
RawValue = Union[bool, int, float, str, list]


class _Vector(BaseModel):
    model_config = ConfigDict(frozen=True)

    _component: ClassVar[type] = int

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        names = list(type(self).model_fields)
        if len(args) > len(names):
            raise TypeError(f"{type(self).__name__} takes {len(names)} components, got {len(args)}")
        kwargs.update(zip(names, args))
        super().__init__(**kwargs)

    @classmethod
    def arity(cls) -> int:
        return len(cls.model_fields)

    def as_tuple(self) -> tuple:
        return tuple(getattr(self, name) for name in type(self).model_fields)

    def to_raw(self) -> list:
        return list(self.as_tuple())

    @classmethod
    def from_raw(cls, raw: Any) -> "_Vector | None":
        """Build a vector from a stored list, or ``None`` if it does not fit this type."""
        if not isinstance(raw, list) or len(raw) != cls.arity():
            return None
        if any(type(c) is not cls._component for c in raw):
            return None
        try:
            return cls(*raw)
        except ValidationError:
            return None


class IVec2(_Vector):
    x: I32
    y: I32


class UVec2(_Vector):
    x: U32
    y: U32


class Vec2(_Vector):
    _component: ClassVar[type] = float

    x: float
    y: float


class IVec3(_Vector):
    x: I32
    y: I32
    z: I32


class UVec3(_Vector):
    x: U32
    y: U32
    z: U32


class Vec3(_Vector):
    _component: ClassVar[type] = float

    x: float
    y: float
    z: float


Value = Union[bool, int, float, str, IVec2, UVec2, Vec2, IVec3, UVec3, Vec3]

SCALAR_TYPES: tuple[type, ...] = (bool, int, float, str)
VECTOR_TYPES: tuple[type[_Vector], ...] = (IVec2, UVec2, Vec2, IVec3, UVec3, Vec3)
VALUE_TYPES: tuple[type, ...] = SCALAR_TYPES + VECTOR_TYPES


def to_raw(value: Value) -> RawValue:
    """Convert a typed value into its document form."""
    if isinstance(value, bool):
        return bool(value)
    if isinstance(value, int):
        if not I64_MIN <= value <= I64_MAX:
            raise ValueError(f"integer {value} is outside the signed 64-bit range")
        return int(value)
    if isinstance(value, float):
        return float(value)
    if isinstance(value, str):
        return str(value)
    if isinstance(value, _Vector):
        return value.to_raw()
    raise TypeError(
        f"unsupported preference value {value!r} of type {type(value).__name__}; "
        f"expected one of: {', '.join(t.__name__ for t in VALUE_TYPES)}"
    )


def check_kind(kind: type) -> None:
    if kind not in VALUE_TYPES:
        raise TypeError(f"unsupported preference type: {kind!r}")


def from_raw(raw: Any, kind: type) -> Value | None:
    """Read a stored value as ``kind``, or ``None`` if the stored type does not match."""
    check_kind(kind)
    if kind in SCALAR_TYPES:
        return raw if type(raw) is kind else None
    return kind.from_raw(raw)


def is_raw_value(raw: Any) -> bool:
    """True if ``raw`` is a valid stored (non-group) value."""
    if type(raw) is int:
        return I64_MIN <= raw <= I64_MAX
    if type(raw) in (bool, float, str):
        return True
    if isinstance(raw, list):
        return len(raw) in (2, 3) and all(type(c) in (int, float) for c in raw)
    return False


def same(a: Any, b: Any) -> bool:
    """Type-strict structural equality of document values.

    ``True`` and ``1`` differ, as do ``1`` and ``1.0``. NaN equals NaN.
    """
    if type(a) is not type(b):
        return False
    if isinstance(a, float):
        return a == b or (math.isnan(a) and math.isnan(b))
    if isinstance(a, list):
        return len(a) == len(b) and all(same(x, y) for x, y in zip(a, b))
    if isinstance(a, dict):
        return a.keys() == b.keys() and all(same(a[k], b[k]) for k in a)
    return a == b
