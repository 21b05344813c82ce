[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minishell"
version = "0.1.0"
description = "A small interactive shell that reads a line, splits it into words and reports the parsed command"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "command-line", "repl", "tokenizer", "printf"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minishell = "minishell.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["minishell"]

[tool.pytest.ini_options]
addopts = "-ra"
