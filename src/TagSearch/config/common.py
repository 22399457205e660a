from __future__ import annotations

"""Typed access to YAML config sections.

Every error message names the dotted config key (``search.cache_max_entries``)
so that a bad override file points straight at the offending line.
"""

from dataclasses import dataclass
from typing import Any, Mapping

_MISSING: Any = object()


@dataclass(frozen=True, slots=True)
class ConfigSection:
    """One top-level section of the raw config mapping.

    Attributes:
        name: Section name, used as the dotted-key prefix.
        values: Raw section mapping (empty for absent optional sections).
    """

    name: str
    values: Mapping[str, Any]

    @classmethod
    def of(cls, raw: Mapping[str, Any], name: str, *, required: bool) -> ConfigSection:
        """Pick section `name` out of the root mapping.

        Raises:
            ValueError: If a required section is missing.
            TypeError: If the section is not a mapping.
        """
        section = raw.get(name)
        if section is None:
            if required:
                raise ValueError(f"Missing required config: {name}")
            return cls(name, {})
        if not isinstance(section, Mapping):
            raise TypeError(f"{name} must be an object")
        return cls(name, section)

    def key(self, field: str) -> str:
        return f"{self.name}.{field}"

    def get(self, field: str, default: Any = _MISSING) -> Any:
        """Return a raw value; without a default the field is required."""
        if field in self.values:
            return self.values[field]
        if default is _MISSING:
            raise ValueError(f"Missing required config: {self.key(field)}")
        return default

    def get_str(self, field: str, default: Any = _MISSING) -> str:
        return expect_str(self.get(field, default), self.key(field))

    def get_bool(self, field: str, default: Any = _MISSING) -> bool:
        return expect_bool(self.get(field, default), self.key(field))

    def get_int(self, field: str, default: Any = _MISSING) -> int:
        return expect_int(self.get(field, default), self.key(field))

    def get_str_list(self, field: str, default: Any = _MISSING) -> list[str]:
        return expect_str_list(self.get(field, default), self.key(field))


def expect_str(value: Any, config_key: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{config_key} must be a string")
    return value


def expect_bool(value: Any, config_key: str) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"{config_key} must be a boolean")
    return value


def expect_int(value: Any, config_key: str) -> int:
    """Validate an integer; YAML booleans are rejected even though bool is an int."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{config_key} must be an integer")
    return value


def expect_str_list(value: Any, config_key: str) -> list[str]:
    if not isinstance(value, list):
        raise TypeError(f"{config_key} must be a list")
    for idx, item in enumerate(value):
        if not isinstance(item, str):
            raise TypeError(f"{config_key}[{idx}] must be a string")
    return list(value)


def require_positive(value: int, config_key: str) -> None:
    """Raise ValueError unless `value` is greater than zero."""
    if value <= 0:
        raise ValueError(f"{config_key} must be positive")
