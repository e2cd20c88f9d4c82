"""Parse MakeMKV robot-mode output into records and serve them over a WebSocket."""

__version__ = "0.1.0"