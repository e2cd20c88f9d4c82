[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "makemkvserver"
version = "0.1.0"
description = "Parse MakeMKV robot-mode output into typed records and serve them over a WebSocket"
requires-python = ">=3.10"
keywords = ["makemkv", "makemkvcon", "websocket", "blu-ray", "dvd", "parser"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Framework :: aiohttp",
    "Topic :: Multimedia :: Video :: Conversion",
]
dependencies = [
    "aiohttp>=3.9",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
makemkvserver = "makemkvserver.server:main"

[tool.hatch.build.targets.wheel]
packages = ["makemkvserver"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
