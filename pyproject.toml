[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rastared"
version = "0.1.0"
description = "RaSTA redundancy layer building blocks: SipHash safety codes, defer queue, redundancy channels, block pool and UDP sockets"
requires-python = ">=3.10"
dependencies = []
keywords = ["rasta", "railway", "redundancy", "siphash", "udp", "safety protocol"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["rastared"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
