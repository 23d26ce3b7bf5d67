[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mallbots"
version = "0.1.0"
description = "Shopping-mall order service: customers, baskets, stores, depot shopping lists, ordering and payments."
requires-python = ">=3.11"
keywords = [
    "domain-driven-design",
    "ordering",
    "shopping",
    "baskets",
    "payments",
    "event-dispatcher",
    "modular-monolith",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]
dependencies = [
    "sqlalchemy>=2.0",
    "python-dotenv>=1.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.4",
    "pytest-asyncio>=0.23",
]

[tool.hatch.build.targets.wheel]
packages = ["mallbots"]

[tool.hatch.build.targets.sdist]
include = ["mallbots", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP", "SIM"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
warn_redundant_casts = true
check_untyped_defs = true
