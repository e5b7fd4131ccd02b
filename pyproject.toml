[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "colorcast"
version = "0.1.0"
description = "Find the dominant colours of a BMP image and draw them as an SVG pie chart over a TCP link"
requires-python = ">=3.10"
dependencies = []
keywords = ["bmp", "colour", "palette", "svg", "pie chart", "socket", "tcp"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
colorcast-server = "colorcast.color_server:main"
colorcast-echo-server = "colorcast.echo_server:main"
colorcast-client = "colorcast.client:main"
colorcast-ls = "colorcast.directory:main"
colorcast-exercises = "colorcast.exercises:main"

[tool.hatch.build.targets.wheel]
packages = ["colorcast"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
