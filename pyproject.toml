[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bitdecimal"
version = "0.1.0"
description = "A 128-bit decimal value (96-bit mantissa, sign and scale) with bit-level access and scale comparison helpers"
requires-python = ">=3.10"
keywords = ["decimal", "fixed-point", "bits", "128-bit", "scale"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bitdecimal"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
