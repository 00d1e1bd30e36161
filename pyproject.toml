[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vickgenda"
version = "0.1.0"
description = "Teacher's agenda toolkit: academic records in SQLite, question bank models, text tables and a focus timer."
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "teacher", "agenda", "grades", "sqlite", "focus"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vickgenda-foco = "vickgenda.focus:main"

[tool.hatch.build.targets.wheel]
packages = ["vickgenda"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
