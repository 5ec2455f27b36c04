[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "azstoragetags"
version = "0.1.0"
description = "List Azure storage accounts, read their properties and read, add and remove their resource tags through Azure Resource Manager"
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["azure", "arm", "resource-manager", "storage", "tags", "cloud"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
azstoragetags = "azstoragetags.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["azstoragetags"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
