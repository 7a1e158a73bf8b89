[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "squaremat"
version = "0.1.0"
description = "Square matrices of real numbers with arithmetic, power, transpose and determinant operators"
requires-python = ">=3.10"
dependencies = []
keywords = ["matrix", "square matrix", "linear algebra", "determinant", "transpose"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
squaremat-demo = "squaremat.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["squaremat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
