[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hsesproto"
version = "0.0.1"
description = "Message, variable, status, position and alarm encoding for the HSES robot controller protocol"
requires-python = ">=3.10"
dependencies = []
keywords = ["hses", "robot", "industrial", "protocol", "controller", "encoding"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Manufacturing",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hsesproto"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
