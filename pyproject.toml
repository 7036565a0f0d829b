[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rwbin"
version = "0.1.0"
description = "Read and write binary data with explicit endianness, synchronously or asynchronously"
requires-python = ">=3.10"
keywords = ["binary", "encode", "decode", "serialize", "deserialize", "endian"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["rwbin"]

[tool.pytest.ini_options]
addopts = "-ra"
