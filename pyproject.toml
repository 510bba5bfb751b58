[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cstrfmt"
version = "0.1.0"
description = "C-style memory helpers, string utilities and a printf-style formatter"
requires-python = ">=3.10"
keywords = ["printf", "sprintf", "format", "string", "memory", "c-style"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Text Processing :: General",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cstrfmt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
