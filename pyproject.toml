[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chatlink"
version = "0.1.0"
description = "Client for a small chat service: sign up, log in and list your friends."
requires-python = ">=3.10"
keywords = ["chat", "messaging", "client", "friends", "login"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]
dependencies = [
    "requests>=2.28",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[project.scripts]
chatlink = "chatlink.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["chatlink"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
