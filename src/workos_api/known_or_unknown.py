"""Forward-compatible decoding of server-sent string enums."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, TypeVar, Union

from pydantic import Field

E = TypeVar("E", bound=Enum)

# Tries the enum first, then keeps the raw string. A value WorkOS adds later
# decodes as ``str`` instead of failing the whole response.
KnownOrUnknown = Annotated[Union[E, str], Field(union_mode="left_to_right")]


def is_known(value: Any, enum_type: type[Enum]) -> bool:
    return isinstance(value, enum_type)
