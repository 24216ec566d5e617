[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minichain"
version = "0.1.0"
description = "A small teaching blockchain: proof-of-work mining of transfer, batch and student-record blocks"
requires-python = ">=3.10"
dependencies = []
keywords = ["blockchain", "proof-of-work", "mining", "education", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Environment :: Console",
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
minichain-transfer = "minichain.transfer:main"
minichain-batch = "minichain.batch:main"
minichain-students = "minichain.students:main"

[tool.hatch.build.targets.wheel]
packages = ["minichain"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
