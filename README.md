# makemkvserver

Tools for the robot-mode output of the MakeMKV command-line program
(`makemkvcon -r`): a parser that turns each line into a typed record, a helper
that runs a disc scan and parses what it prints, a JSON configuration loader,
and a small WebSocket server.

## Install

```
pip install .
```

With the test tools:

```
pip install ".[test]"
```

## Parsing lines

`makemkvserver.parser.parse(line)` takes one line of robot-mode output and
returns a record from `makemkvserver.outputs`:

```python
from makemkvserver.parser import parse

record = parse("PRGV:1,100,200")
record.type_name()  # "ProgressBarOutput"
record.to_dict()    # {"CurrentProgress": "1", "TotalProgress": "100", "MaxProgress": "200"}
```

Surrounding whitespace and every double quote are removed before the prefix is
matched. The recognised prefixes and the records they give:

| Prefix   | Record                         |
|----------|--------------------------------|
| `MSG:`   | `MessageOutput`                |
| `DRV:`   | `DriveScanMessage`             |
| `PRGC:`  | `CurrentProgressTitleOutput`   |
| `PRGT:`  | `TotalProgressTitleOutput`     |
| `PRGV:`  | `ProgressBarOutput`            |
| `TCOUT:` | `DiscInformationOutputMessage` |
| `CINFO:` | `DiscInformation`              |
| `TINFO:` | `TitleInformation`             |
| `SINFO:` | `StreamInformation`            |

Records are frozen dataclasses. `MessageOutput.message_params` holds the
parameters after the fifth field, but only when the parameter count is positive
and that many fields are present; otherwise it is empty. `DriveScanMessage`
fields `visible` and `enabled` accept `1`, `t`, `T`, `true`, `True`, `TRUE` and
their false counterparts.

Failures raise subclasses of `ParseError` (itself a `ValueError`):

- `EmptyInputError` when the line is blank.
- `PrefixNotFoundError` when no known prefix matches.
- `NotEnoughValuesError` when the line has too few fields, or a `MSG:` line's
  parameter count is not an integer.
- `ParseError` itself for a bad integer in `TCOUT:` or a bad boolean in `DRV:`.

`to_dict()` keys fields by their wire names (`drive_index` becomes `DriveIndex`,
`id` becomes `ID`). `JsonWrapper.wrap(record).to_json()` gives the compact JSON
envelope `{"type": ..., "data": {...}}`.

## Parsing a stream

`makemkvserver.stream.parse_stream(lines)` takes any iterable of `str` or
`bytes` lines (an open file, a process's stdout) and yields one result per line.
A line that cannot be parsed is logged as a warning and yields `None`, so results
stay aligned with the input.

## Running a disc scan

`makemkvserver.commands.mkv(executable="makemkvcon")` runs
`makemkvcon -r --cache=1 info disc:9999` and yields the parsed output lines as
they arrive. It raises `subprocess.CalledProcessError` if the program exits with
a non-zero status and `OSError` if it cannot be started.

```python
from makemkvserver.commands import mkv

for record in mkv():
    if record is not None:
        print(record.type_name(), record.to_dict())
```

## Configuration

`makemkvserver.config.Config.from_json(text)` (or `Config.from_dict(data)`)
reads a settings document like this:

```json
{
  "executable_path": "/usr/bin/makemkvcon",
  "arguments": {
    "debug": true,
    "direct_io": false,
    "robot_mode": true,
    "registration_key": "placeholder"
  }
}
```

Keys are matched exactly first and then without regard to case; missing keys
take their defaults (`False` and `""`), unknown keys are ignored, and a value of
the wrong type raises `TypeError`.

## The WebSocket server

```
makemkvserver [--host HOST] [--port PORT]
```

The server listens on all interfaces, port 8080 by default, and serves the
`/events` WebSocket endpoint. Once a second it takes a line from the
application's line source, parses it, and sends the `JsonWrapper` JSON to the
client. The connection is closed when a line cannot be parsed or the client can
no longer be written to. `makemkvserver.server.create_app()` builds the
application for embedding or testing.

## What it does not do

The server is not connected to a running `makemkvcon`. Its default line source
returns the fixed text `test`, which no prefix matches, so a client that
connects to `/events` is disconnected after the first tick without receiving a
message. The disc scan helper and the configuration loader are available to
library callers but are not used by the server, and the configuration's
executable path and arguments are not applied to any command line.