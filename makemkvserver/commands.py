"""Run makemkvcon and parse what it prints."""

from __future__ import annotations

import subprocess
from collections.abc import Iterator

from makemkvserver.outputs import MakeMkvOutput
from makemkvserver.stream import parse_stream

DEFAULT_EXECUTABLE = "makemkvcon"
INFO_ARGUMENTS = ("-r", "--cache=1", "info", "disc:9999")


def mkv(executable: str = DEFAULT_EXECUTABLE) -> Iterator[MakeMkvOutput | None]:
    """Run a robot-mode disc info scan and yield each parsed output line.

    Raises ``subprocess.CalledProcessError`` when the program exits with a
    non-zero status, and ``OSError`` when it cannot be started.
    """
    args = [executable, *INFO_ARGUMENTS]
    with subprocess.Popen(args, stdout=subprocess.PIPE, text=True) as process:
        yield from parse_stream(process.stdout)  # type: ignore[arg-type]
        returncode = process.wait()
    if returncode:
        raise subprocess.CalledProcessError(returncode, args)