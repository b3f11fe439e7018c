[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wearlink"
version = "0.1.0"
description = "Wire-protocol codecs and session state for Pixel Buds A (Maestro) earbuds and Huawei Band 9 fitness bands"
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = [
    "bluetooth",
    "ble",
    "rfcomm",
    "wearables",
    "earbuds",
    "fitness-band",
    "protocol",
    "tlv",
    "protobuf",
]
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
    "Topic :: Communications",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["wearlink"]

[tool.hatch.build.targets.sdist]
include = [
    "wearlink",
    "tests",
    "pyproject.toml",
]

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
