[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jled"
version = "1.0.0"
description = "Non-blocking LED effects: blink, fade, breathe, candle and morse, driven by a millisecond clock"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "led",
    "pwm",
    "blink",
    "fade",
    "breathe",
    "candle",
    "morse",
    "embedded",
    "non-blocking",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jled"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
