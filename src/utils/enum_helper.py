"""Enum <-> string conversion for configuration values and log output"""

from enum import Enum
from typing import TypeVar, Type, Optional, List

E = TypeVar("E", bound=Enum)


class EnumHelper:
    """
    Name-based enum conversions

    Example:
        EnumHelper.to_string(SpiralType.EPITROCHOID, lowercase=True)   # "epitrochoid"
        EnumHelper.from_string(SpiralType, " Hypotrochoid ")          # SpiralType.HYPOTROCHOID
        EnumHelper.list_names(LogLevel)                               # ["DEBUG", "INFO", "WARN", "ERROR"]
    """

    @staticmethod
    def to_string(enum_value: E, lowercase: bool = False) -> str:
        """Member name, optionally lower-cased (config files use lower case)"""
        if not isinstance(enum_value, Enum):
            raise TypeError(f"Expected Enum, got {type(enum_value).__name__}")
        return enum_value.name.lower() if lowercase else enum_value.name

    @staticmethod
    def from_string(enum_class: Type[E], name: str, default: Optional[E] = None) -> E:
        """
        Parse a member name, ignoring case and surrounding whitespace

        Members of enum_class are returned unchanged, so values that were
        already parsed can go through again.

        Raises:
            ValueError: Unknown name and no default given
        """
        if isinstance(name, enum_class):
            return name

        member = enum_class.__members__.get(str(name).strip().upper())
        if member is not None:
            return member
        if default is not None:
            return default

        raise ValueError(
            f"Invalid {enum_class.__name__}: {name!r} "
            f"(expected one of {EnumHelper.list_names(enum_class, lowercase=True)})"
        )

    @staticmethod
    def list_names(enum_class: Type[E], lowercase: bool = False) -> List[str]:
        names = list(enum_class.__members__)
        return [n.lower() for n in names] if lowercase else names
