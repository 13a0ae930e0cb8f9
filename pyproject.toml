[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fwos"
version = "0.1.0"
description = "A small simulated firewall control plane: rule-based flow evaluation, session tracking, auditing and verdict counters."
requires-python = ">=3.10"
dependencies = []
keywords = ["firewall", "policy", "control-plane", "simulation", "sessions", "audit"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Firewalls",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fwos-x = "fwos.control_plane:main"

[tool.hatch.build.targets.wheel]
packages = ["fwos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
