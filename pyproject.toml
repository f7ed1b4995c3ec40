[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exdrill"
version = "5.1.1"
description = "Compile, run and check the progress of small programming exercises, with worked drills"
requires-python = ">=3.11"
dependencies = []
keywords = ["exercises", "learning", "teaching", "compiler", "drills"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["exdrill"]

[tool.pytest.ini_options]
addopts = "-ra"
