"""Parse single lines of makemkvcon robot-mode output."""

from __future__ import annotations

import re
from collections.abc import Callable

from makemkvserver.outputs import (
    CurrentProgressTitleOutput,
    DiscInformation,
    DiscInformationOutputMessage,
    DriveScanMessage,
    MakeMkvOutput,
    MessageOutput,
    ProgressBarOutput,
    StreamInformation,
    TitleInformation,
    TotalProgressTitleOutput,
)

DELIMITER = ","
_MESSAGE_PARAMS_OFFSET = 5

_INTEGER = re.compile(r"[+-]?[0-9]+")
_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


class ParseError(ValueError):
    """A line could not be parsed."""


class EmptyInputError(ParseError):
    """The line held nothing but whitespace."""

    def __init__(self) -> None:
        super().__init__("input is empty")


class PrefixNotFoundError(ParseError):
    """The line did not start with a known prefix."""

    def __init__(self) -> None:
        super().__init__("Prefix did not match expected")


class NotEnoughValuesError(ParseError):
    """The line held fewer values than its kind needs."""

    def __init__(self) -> None:
        super().__init__("Not enough values found in input")


def _split(body: str, needed: int) -> list[str]:
    parts = body.split(DELIMITER)
    if len(parts) < needed:
        raise NotEnoughValuesError()
    return parts


def _parse_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ParseError(f"invalid integer: {text!r}")
    return int(text)


def _parse_bool(text: str) -> bool:
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    raise ParseError(f"invalid boolean: {text!r}")


def _message(body: str) -> MessageOutput:
    parts = _split(body, _MESSAGE_PARAMS_OFFSET)
    try:
        count = _parse_int(parts[2])
    except ParseError:
        raise NotEnoughValuesError() from None
    params: tuple[str, ...] = ()
    if count > 0 and count + _MESSAGE_PARAMS_OFFSET <= len(parts):
        params = tuple(parts[_MESSAGE_PARAMS_OFFSET : _MESSAGE_PARAMS_OFFSET + count])
    return MessageOutput(
        code=parts[0],
        flags=parts[1],
        parameter_count=count,
        raw_message=parts[3],
        format_message=parts[4],
        message_params=params,
    )


def _drive_scan(body: str) -> DriveScanMessage:
    index, visible, enabled, flags, drive_name, disc_name = _split(body, 6)[:6]
    return DriveScanMessage(
        drive_index=index,
        visible=_parse_bool(visible),
        enabled=_parse_bool(enabled),
        flags=flags,
        drive_name=drive_name,
        disc_name=disc_name,
    )


def _current_progress_title(body: str) -> CurrentProgressTitleOutput:
    code, ident, name = _split(body, 3)[:3]
    return CurrentProgressTitleOutput(code=code, id=ident, name=name)


def _total_progress_title(body: str) -> TotalProgressTitleOutput:
    code, ident, name = _split(body, 3)[:3]
    return TotalProgressTitleOutput(code=code, id=ident, name=name)


def _disc_info_output(body: str) -> DiscInformationOutputMessage:
    return DiscInformationOutputMessage(title_count=_parse_int(body))


def _disc_info(body: str) -> DiscInformation:
    ident, code, value = _split(body, 3)[:3]
    return DiscInformation(id=ident, code=code, value=value)


def _progress_bar(body: str) -> ProgressBarOutput:
    current, total, maximum = _split(body, 3)[:3]
    return ProgressBarOutput(current_progress=current, total_progress=total, max_progress=maximum)


def _stream_info(body: str) -> StreamInformation:
    ident, code, value = _split(body, 3)[:3]
    return StreamInformation(id=ident, code=code, value=value)


def _title_info(body: str) -> TitleInformation:
    ident, code, value = _split(body, 3)[:3]
    return TitleInformation(id=ident, code=code, value=value)


_PARSERS: tuple[tuple[str, Callable[[str], MakeMkvOutput]], ...] = (
    ("MSG:", _message),
    ("DRV:", _drive_scan),
    ("PRGC:", _current_progress_title),
    ("TCOUT:", _disc_info_output),
    ("CINFO:", _disc_info),
    ("PRGV:", _progress_bar),
    ("SINFO:", _stream_info),
    ("TINFO:", _title_info),
    ("PRGT:", _total_progress_title),
)


def parse(line: str) -> MakeMkvOutput:
    """Parse one output line into its record.

    Surrounding whitespace and every double quote are dropped first.
    Raises a ParseError subclass when the line cannot be parsed.
    """
    line = line.strip()
    if not line:
        raise EmptyInputError()
    sanitised = line.replace('"', "")
    for prefix, handler in _PARSERS:
        if sanitised.startswith(prefix):
            return handler(sanitised[len(prefix) :])
    raise PrefixNotFoundError()