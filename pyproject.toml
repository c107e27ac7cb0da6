[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sbiproto"
version = "0.1.0"
description = "Terminal configurator for RISC-V SBI firmware prototypes, with xfel command helpers"
requires-python = ">=3.10"
keywords = ["risc-v", "sbi", "firmware", "bootloader", "configuration", "tui", "curses", "xfel"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Natural Language :: English",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]
dependencies = [
    "tomlkit",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sbiproto = "sbiproto.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sbiproto"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
