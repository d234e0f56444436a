[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "winix"
version = "0.1.0"
description = "Familiar Unix-style commands and a small interactive shell that run natively, without a Linux layer"
requires-python = ">=3.10"
keywords = ["shell", "unix", "commands", "cli", "grep", "cat", "head", "kill", "chmod", "ansi"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
    "Topic :: Utilities",
]
dependencies = [
    "psutil",
    "termcolor",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
winix = "winix.shell:main"
disown = "winix.disown:main"

[tool.hatch.build.targets.wheel]
packages = ["winix"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
