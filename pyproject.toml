[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "modinit"
version = "0.0.1"
description = "Dependency-ordered initialisation and teardown of application modules"
requires-python = ">=3.10"
dependencies = []
keywords = ["initialization", "lifecycle", "dependencies", "modules", "startup", "shutdown"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
modinit-demo = "modinit.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["modinit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
