[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nfaregex"
version = "0.1.0"
description = "A small regular expression engine built on Thompson NFAs"
requires-python = ">=3.10"
dependencies = []
keywords = ["regex", "nfa", "automata", "pattern matching", "thompson"]
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
    "Topic :: Text Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nfaregex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
