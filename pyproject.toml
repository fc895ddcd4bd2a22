[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rtoskit"
version = "0.1.0"
description = "A small simulated real-time kernel: ordered kernel lists, static task creation, initial stack frames and round-robin context switching"
requires-python = ">=3.10"
dependencies = []
keywords = ["rtos", "kernel", "scheduler", "linked-list", "simulation", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Operating System Kernels",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rtoskit-demo = "rtoskit.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["rtoskit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
