[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dvbclient"
version = "1.0.0"
description = "Client for the Dresden public transport (DVB/VVO) web API: departures, lines, stops and trip planning"
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["dvb", "vvo", "dresden", "public transport", "departures", "api client"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
dvbclient-example = "dvbclient.example:main"

[tool.hatch.build.targets.wheel]
packages = ["dvbclient"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
