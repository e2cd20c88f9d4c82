"""Server configuration loaded from JSON."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

_MISSING = object()


def _lookup(data: dict[str, Any], key: str) -> Any:
    """Find a key, exactly first and then ignoring case."""
    if key in data:
        return data[key]
    folded = key.casefold()
    for name, value in data.items():
        if isinstance(name, str) and name.casefold() == folded:
            return value
    return _MISSING


def _typed(data: dict[str, Any], key: str, kind: type, default: Any) -> Any:
    value = _lookup(data, key)
    if value is _MISSING or value is None:
        return default
    if not isinstance(value, kind):
        raise TypeError(f"{key!r} must be of type {kind.__name__}")
    return value


@dataclass
class Arguments:
    """Command-line switches passed to makemkvcon."""

    debug: bool = False
    direct_io: bool = False
    robot_mode: bool = False
    registration_key: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Arguments:
        return cls(
            debug=_typed(data, "debug", bool, False),
            direct_io=_typed(data, "direct_io", bool, False),
            robot_mode=_typed(data, "robot_mode", bool, False),
            registration_key=_typed(data, "registration_key", str, ""),
        )


@dataclass
class Config:
    """Where makemkvcon lives and how to call it."""

    executable_path: str = ""
    arguments: Arguments = field(default_factory=Arguments)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Build a config from decoded JSON; unknown keys are ignored."""
        if not isinstance(data, dict):
            raise TypeError("configuration must be a JSON object")
        arguments = _typed(data, "Arguments", dict, None)
        return cls(
            executable_path=_typed(data, "executable_path", str, ""),
            arguments=Arguments() if arguments is None else Arguments.from_dict(arguments),
        )

    @classmethod
    def from_json(cls, text: str | bytes) -> Config:
        """Build a config from JSON text."""
        return cls.from_dict(json.loads(text))