[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "topup"
version = "1.0.0"
description = "A small e-wallet top-up service with direct and bank-transfer top-ups, limits and a JSON HTTP API."
requires-python = ">=3.10"
dependencies = [
    "flask",
]
keywords = ["e-wallet", "top-up", "wallet", "virtual account", "payments", "flask", "api"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
topup-server = "topup.app:main"
topup-bank = "topup.client:main"

[tool.hatch.build.targets.wheel]
packages = ["topup"]

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
