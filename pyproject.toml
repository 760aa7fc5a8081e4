[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ecfspooler"
version = "4.1.0b0"
description = "Text packet format, session handling and status decoding for a fiscal printer (ECF) spooler"
requires-python = ">=3.10"
dependencies = []
keywords = ["ecf", "fiscal printer", "spooler", "point of sale", "bematech", "rc4"]
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
    "Natural Language :: Portuguese (Brazilian)",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rc4-crypt = "ecfspooler.rc4crypt:main"

[tool.hatch.build.targets.wheel]
packages = ["ecfspooler"]

[tool.pytest.ini_options]
addopts = "-ra"
