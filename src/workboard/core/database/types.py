"""Custom column types."""

from enum import IntEnum
from typing import Any

from sqlalchemy import Integer
from sqlalchemy.types import TypeDecorator


class IntEnumType(TypeDecorator[IntEnum]):
    """Store an ``IntEnum`` as its integer value.

    Status and priority ordering in queries relies on the stored integers,
    so the plain ``Enum`` type (which stores names) is not used here.
    """

    impl = Integer
    cache_ok = True

    def __init__(self, enum_class: type[IntEnum], *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.enum_class = enum_class

    def process_bind_param(self, value: Any, dialect: Any) -> int | None:
        if value is None:
            return None
        return int(value)

    def process_result_value(self, value: Any, dialect: Any) -> IntEnum | None:
        if value is None:
            return None
        return self.enum_class(value)
