[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jaegerkit"
version = "0.1.0"
description = "Helpers for describing Jaeger deployments: DNS-safe names, spec merging, labels, option lookups and version info"
requires-python = ">=3.10"
keywords = ["jaeger", "tracing", "kubernetes", "dns", "labels"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jaegerkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
