[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "thin"
version = "0.1.0"
description = "Finds AI-sounding writing in your READMEs without using AI: a rule-based prose linter."
requires-python = ">=3.11"
dependencies = []
keywords = ["linter", "prose", "cli", "writing", "markdown"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
    "Topic :: Documentation",
    "Topic :: Software Development :: Quality Assurance",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
thin = "thin.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["thin"]

[tool.hatch.build.targets.sdist]
include = ["thin", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
strict = true
