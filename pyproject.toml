[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oscamp"
version = "0.1.0"
description = "Small, runnable models of operating-system concepts: atomics, locks, async tasks, page tables and TLBs"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating-systems",
    "concurrency",
    "spinlock",
    "rwlock",
    "asyncio",
    "page-table",
    "sv39",
    "tlb",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["oscamp"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
