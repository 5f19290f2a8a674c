[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rmd_actuator"
version = "0.0.1"
description = "Actuator specifications, state records, reply decoding and a CAN driver for RMD-X series actuators"
requires-python = ">=3.10"
dependencies = []
keywords = ["can", "socketcan", "actuator", "motor", "robotics", "rmd"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems :: Controller Area Network (CAN)",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rmd_actuator"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
