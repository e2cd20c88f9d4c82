"""Turn a stream of makemkvcon output lines into parsed records."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from makemkvserver.outputs import MakeMkvOutput
from makemkvserver.parser import ParseError, parse

logger = logging.getLogger(__name__)


def parse_stream(lines: Iterable[str | bytes]) -> Iterator[MakeMkvOutput | None]:
    """Parse every line of ``lines`` in order.

    A line that cannot be parsed is logged and yields ``None`` in its place,
    so the results stay aligned with the input lines.
    """
    for line in lines:
        if isinstance(line, bytes):
            line = line.decode("utf-8", errors="replace")
        try:
            yield parse(line)
        except ParseError as exc:
            logger.warning("%s", exc)
            yield None