[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wirefdf"
version = "0.1.0"
description = "Isometric wireframe rendering of height maps onto in-memory RGBA images"
requires-python = ">=3.10"
dependencies = []
keywords = ["wireframe", "isometric", "height map", "line tracing", "xpm42", "rgba", "canvas"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wirefdf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
