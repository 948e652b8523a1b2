[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zclframe"
version = "0.1.0a2"
description = "Reading and writing ZigBee Cluster Library frames, headers and pressure measurement attributes"
requires-python = ">=3.10"
dependencies = []
keywords = ["zigbee", "ieee802154", "zcl", "cluster-library"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
    "Topic :: Software Development :: Embedded Systems",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zclframe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
