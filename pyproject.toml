[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shiftroster"
version = "0.1.0"
description = "Build a monthly doctor shift roster from weekly limits and shift preferences"
requires-python = ">=3.10"
dependencies = []
keywords = ["roster", "scheduling", "shifts", "doctors", "rota"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Healthcare Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
shiftroster = "shiftroster.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["shiftroster"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
