[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bbbs"
version = "0.1.0"
description = "A small message board as a Starlette application with server-rendered HTML pages"
requires-python = ">=3.10"
keywords = ["bbs", "message board", "web", "starlette", "asgi"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: AsyncIO",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content :: Message Boards",
]
dependencies = [
    "starlette",
]

[project.optional-dependencies]
test = [
    "pytest",
    "httpx",
]

[tool.hatch.build.targets.wheel]
packages = ["bbbs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
