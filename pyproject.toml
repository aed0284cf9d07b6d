[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oauthcore"
version = "0.1.0"
description = "Core building blocks for an OAuth 2.0 authorization server: token models, generators, PKCE and permission checks"
requires-python = ">=3.10"
keywords = ["oauth2", "oauth", "authorization", "pkce", "jwt", "permissions"]
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
    "Topic :: Internet :: WWW/HTTP :: Session",
    "Topic :: Security",
]
dependencies = [
    "pyjwt>=2.8",
    "cryptography>=41",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
]

[tool.hatch.build.targets.wheel]
packages = ["oauthcore"]

[tool.pytest.ini_options]
addopts = "-ra"
