[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zkit"
version = "0.1.0"
description = "Deflate-family tools: checksums, zlib streams, gzip files, block fitting, prefix-code counting, Huffman trees and small record keepers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "zlib",
    "deflate",
    "gzip",
    "adler32",
    "crc32",
    "huffman",
    "compression",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Compression",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
zkit-compress = "zkit.compression:main"
zkit-fitblk = "zkit.fitblk:main"
zkit-minigzip = "zkit.minigzip:main"
zkit-zheader = "zkit.zheader:main"
zkit-students = "zkit.students:main"
zkit-roster = "zkit.roster:main"
zkit-courses = "zkit.courses:main"
zkit-stack = "zkit.stack:main"

[tool.hatch.build.targets.wheel]
packages = ["zkit"]

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
