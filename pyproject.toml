[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "amocrm-sdk"
version = "0.1.0"
description = "Client library for the amoCRM REST API: OAuth2 tokens and access rights"
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["amocrm", "crm", "api", "client", "oauth2", "sdk", "access-rights"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["amocrm_sdk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
