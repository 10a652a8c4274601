[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "httpmsgsig"
version = "0.1.0"
description = "HTTP Message Signatures building blocks: Structured Field Values parsing and serialization, and ECDSA signature algorithms"
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = ["http", "signatures", "rfc9421", "rfc8941", "structured-fields", "ecdsa"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["httpmsgsig"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
