[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelhunt"
version = "0.1.0"
description = "A joystick target-hunting game on a simulated 128x64 SSD1306 display and 5x5 LED matrix"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "ssd1306", "oled", "led-matrix", "joystick", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pixelhunt = "pixelhunt.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pixelhunt"]

[tool.hatch.build.targets.sdist]
include = ["pixelhunt", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
