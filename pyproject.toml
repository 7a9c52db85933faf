[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "terrascan"
version = "1.1.0"
description = "Building blocks for scanning infrastructure-as-code: violation results, policy types, document loading and colored output"
requires-python = ">=3.10"
keywords = [
    "security",
    "infrastructure-as-code",
    "terraform",
    "kubernetes",
    "policy",
    "compliance",
    "static-analysis",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
    "Topic :: Software Development :: Quality Assurance",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["terrascan"]

[tool.pytest.ini_options]
addopts = "-ra"
