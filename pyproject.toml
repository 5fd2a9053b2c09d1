[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "relicfs"
version = "0.1.0"
description = "Hex-dump image recovery and the operations of two virtual filesystems: chunked relic storage and a name-filtering mirror"
requires-python = ">=3.10"
dependencies = []
keywords = ["filesystem", "hex", "chunking", "rot13", "virtual-filesystem"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
relicfs-hexed = "relicfs.hexed:main"

[tool.hatch.build.targets.wheel]
packages = ["relicfs"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
