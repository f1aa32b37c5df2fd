[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpamm"
version = "0.1.0"
description = "Constant-product AMM math: sqrt-price curve, vesting validation, quote-token and pool-key rules"
requires-python = ">=3.10"
dependencies = []
keywords = ["amm", "liquidity", "concentrated-liquidity", "sqrt-price", "vesting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["cpamm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
