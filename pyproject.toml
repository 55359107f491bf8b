[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "casebook"
version = "0.1.0"
description = "Pure-Python secret-key and public-key encryption primitives, plus a collection of algorithmic contest solvers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cryptography",
    "curve25519",
    "x25519",
    "xsalsa20",
    "poly1305",
    "sha512",
    "algorithms",
    "competitive-programming",
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
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
casebook-box-demo = "casebook.crypto.demo:main"
casebook-2061b = "casebook.contests.p2061b:main"
casebook-2061c = "casebook.contests.p2061c:main"
casebook-2062d = "casebook.contests.p2062d:main"
casebook-2063e = "casebook.contests.p2063e:main"
casebook-2064d = "casebook.contests.p2064d:main"
casebook-2064e = "casebook.contests.p2064e:main"
casebook-2065d = "casebook.contests.p2065d:main"
casebook-2066c = "casebook.contests.p2066c:main"
casebook-2066f = "casebook.contests.p2066f:main"
casebook-2067b = "casebook.contests.p2067b:main"
casebook-2067c = "casebook.contests.p2067c:main"
casebook-2069b = "casebook.contests.p2069b:main"
casebook-2069c = "casebook.contests.p2069c:main"
casebook-2071b = "casebook.contests.p2071b:main"
casebook-2071c = "casebook.contests.p2071c:main"
casebook-2071e = "casebook.contests.p2071e:main"
casebook-2073d = "casebook.contests.p2073d:main"
casebook-2073f = "casebook.contests.p2073f:main"
casebook-2074d = "casebook.contests.p2074d:main"
casebook-2075c = "casebook.contests.p2075c:main"
casebook-2075d = "casebook.contests.p2075d:main"
casebook-2077a = "casebook.contests.p2077a:main"
casebook-2077c = "casebook.contests.p2077c:main"
casebook-2077d = "casebook.contests.p2077d:main"

[tool.hatch.build.targets.wheel]
packages = ["casebook"]

[tool.hatch.build.targets.sdist]
include = ["casebook", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
