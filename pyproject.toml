[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xmrprimitives"
version = "0.1.0"
description = "Primitives for the Monero protocol: Ed25519 scalars and points, Keccak-256 hashing, commitment contents, decoy data and legacy scalar recovery"
requires-python = ">=3.10"
keywords = ["monero", "ed25519", "keccak", "scalar", "decoys", "cryptography"]
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
    "Topic :: Security :: Cryptography",
]
dependencies = [
    "pycryptodome",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["xmrprimitives"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
