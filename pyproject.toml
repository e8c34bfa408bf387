[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ticketsched"
version = "0.1.0"
description = "A small cooperative task scheduler with round-robin and lottery policies driven by ticket budgets"
requires-python = ">=3.10"
dependencies = []
keywords = ["scheduler", "round-robin", "lottery", "cooperative", "generators", "operating-systems"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ticketsched-demo = "ticketsched.demo:main"
ticketsched-examples = "ticketsched.examples:main"

[tool.hatch.build.targets.wheel]
packages = ["ticketsched"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
