[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gapicgen"
version = "0.1.0"
description = "Building blocks for generating API client libraries and code snippets from protobuf descriptors"
requires-python = ">=3.10"
dependencies = [
    "protobuf",
]
keywords = ["protobuf", "grpc", "code-generation", "gapic", "snippets", "service-config"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["gapicgen"]

[tool.pytest.ini_options]
addopts = "-ra"
