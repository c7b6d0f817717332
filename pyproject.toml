[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "agendamento"
version = "0.1.0"
description = "Scheduling service backend: data models, schema migrations and an HTTP API."
requires-python = ">=3.10"
keywords = ["scheduling", "appointments", "booking", "flask", "sqlalchemy", "migrations"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]
dependencies = [
    "sqlalchemy>=2.0",
    "flask>=2.2",
    "python-dotenv>=1.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
agendamento = "agendamento.main:main"

[tool.hatch.build.targets.wheel]
packages = ["agendamento"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
