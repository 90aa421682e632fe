[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rustlings"
version = "5.5.1"
description = "Library for small Rust exercises: load info.toml, compile and run exercises, read their progress, plus worked solutions"
requires-python = ">=3.11"
dependencies = []
keywords = ["rust", "exercises", "learning", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
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
packages = ["rustlings"]

[tool.pytest.ini_options]
addopts = "-ra"
