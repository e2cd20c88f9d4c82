"""Typed records for the lines that makemkvcon prints in robot mode."""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass
from typing import Any


def _json_key(name: str) -> str:
    """Turn a snake_case field name into the key used on the wire."""
    return "".join("ID" if part == "id" else part.capitalize() for part in name.split("_"))


def _json_value(value: Any) -> Any:
    if isinstance(value, tuple):
        return list(value)
    return value


class MakeMkvOutput:
    """Base for every parsed makemkvcon output record."""

    def type_name(self) -> str:
        """Name of the record kind, as sent to clients."""
        return type(self).__name__

    def to_dict(self) -> dict[str, Any]:
        """Fields of the record keyed by their wire names."""
        return {
            _json_key(f.name): _json_value(getattr(self, f.name))
            for f in dataclasses.fields(self)  # type: ignore[arg-type]
        }


@dataclass(frozen=True)
class MessageOutput(MakeMkvOutput):
    """A ``MSG:`` line: a message with optional parameters."""

    code: str
    flags: str
    parameter_count: int
    raw_message: str
    format_message: str
    message_params: tuple[str, ...] = ()


@dataclass(frozen=True)
class CurrentProgressTitleOutput(MakeMkvOutput):
    """A ``PRGC:`` line: title of the current operation."""

    code: str
    id: str
    name: str


@dataclass(frozen=True)
class TotalProgressTitleOutput(MakeMkvOutput):
    """A ``PRGT:`` line: title of the overall operation."""

    code: str
    id: str
    name: str


@dataclass(frozen=True)
class ProgressBarOutput(MakeMkvOutput):
    """A ``PRGV:`` line: progress bar values."""

    current_progress: str
    total_progress: str
    max_progress: str


@dataclass(frozen=True)
class DriveScanMessage(MakeMkvOutput):
    """A ``DRV:`` line: one drive found during a scan."""

    drive_index: str
    visible: bool
    enabled: bool
    flags: str
    drive_name: str
    disc_name: str


@dataclass(frozen=True)
class DiscInformationOutputMessage(MakeMkvOutput):
    """A ``TCOUT:`` line: the number of titles on a disc."""

    title_count: int


@dataclass(frozen=True)
class DiscInformation(MakeMkvOutput):
    """A ``CINFO:`` line: one attribute of a disc."""

    id: str
    code: str
    value: str


@dataclass(frozen=True)
class TitleInformation(MakeMkvOutput):
    """A ``TINFO:`` line: one attribute of a title."""

    id: str
    code: str
    value: str


@dataclass(frozen=True)
class StreamInformation(MakeMkvOutput):
    """An ``SINFO:`` line: one attribute of a stream."""

    id: str
    code: str
    value: str


@dataclass(frozen=True)
class JsonWrapper:
    """Envelope pairing a record with its type name for clients."""

    type: str
    data: MakeMkvOutput | None

    @classmethod
    def wrap(cls, output: MakeMkvOutput) -> JsonWrapper:
        """Wrap a record, taking the type from the record itself."""
        return cls(type=output.type_name(), data=output)

    def to_dict(self) -> dict[str, Any]:
        """The envelope as plain data."""
        return {
            "type": self.type,
            "data": None if self.data is None else self.data.to_dict(),
        }

    def to_json(self) -> str:
        """The envelope as compact JSON text."""
        return json.dumps(self.to_dict(), separators=(",", ":"))