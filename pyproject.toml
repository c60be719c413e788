[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "threadkit"
version = "0.1.0"
description = "Shared-memory threading utilities: a thread pool, barriers, locks, queues, ring buffers, reductions and a parallel heat solver."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "threading",
    "thread pool",
    "barrier",
    "spin lock",
    "ring buffer",
    "reduction",
    "pipeline",
    "concurrency",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
threadkit-heat = "threadkit.heat:main"
threadkit-pool = "threadkit.threadpool:main"

[tool.hatch.build.targets.wheel]
packages = ["threadkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
