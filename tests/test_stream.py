import io
import logging
import os
import threading

from makemkvserver.outputs import ProgressBarOutput
from makemkvserver.parser import parse
from makemkvserver.stream import parse_stream

MAX_PERCENTAGE = 20
TOTAL_PERCENTAGE = 10


def _progress_lines():
    return [
        f"PRGV:{current},{TOTAL_PERCENTAGE},{MAX_PERCENTAGE}\n"
        for current in range(TOTAL_PERCENTAGE + 1)
    ]


def _simulated_progress_pipe():
    read_fd, write_fd = os.pipe()
    reader = os.fdopen(read_fd, "r")

    def write():
        with os.fdopen(write_fd, "w") as writer:
            for line in _progress_lines():
                writer.write(line)

    thread = threading.Thread(target=write)
    thread.start()
    return reader, thread


def _lines_failing_after_first():
    yield "PRGV:1,100,200"
    raise RuntimeError("should not be reached")


def test_process_stream_from_pipe():
    reader, thread = _simulated_progress_pipe()
    with reader:
        results = list(parse_stream(reader))
    thread.join()

    assert len(results) == TOTAL_PERCENTAGE + 1
    assert all(isinstance(result, ProgressBarOutput) for result in results)
    assert [result.current_progress for result in results] == [
        str(n) for n in range(TOTAL_PERCENTAGE + 1)
    ]
    assert {result.total_progress for result in results} == {str(TOTAL_PERCENTAGE)}
    assert {result.max_progress for result in results} == {str(MAX_PERCENTAGE)}


def test_results_match_single_line_parse():
    lines = _progress_lines()
    results = list(parse_stream(io.StringIO("".join(lines))))
    assert results == [parse(line) for line in lines]


def test_unparsable_line_yields_none_and_is_logged(caplog):
    lines = ["PRGV:1,100,200", "not a record", "TINFO:1,CODE,Value"]
    with caplog.at_level(logging.WARNING, logger="makemkvserver.stream"):
        results = list(parse_stream(lines))

    assert results[0] == parse("PRGV:1,100,200")
    assert results[1] is None
    assert results[2] == parse("TINFO:1,CODE,Value")
    assert "Prefix did not match expected" in caplog.text


def test_empty_line_yields_none(caplog):
    with caplog.at_level(logging.WARNING, logger="makemkvserver.stream"):
        results = list(parse_stream(["", "PRGC:1,1,Test"]))

    assert results[0] is None
    assert results[1] == parse("PRGC:1,1,Test")
    assert "input is empty" in caplog.text


def test_bytes_lines_are_decoded():
    results = list(parse_stream([b"PRGV:1,100,200\r\n", b"TCOUT:1\n"]))
    assert results == [parse("PRGV:1,100,200"), parse("TCOUT:1")]


def test_stream_is_lazy():
    iterator = parse_stream(_lines_failing_after_first())
    assert next(iterator) == parse("PRGV:1,100,200")