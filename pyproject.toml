[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dcafkit"
version = "0.2.0"
description = "Building blocks for DCAF/ACE authorization: keys, AES-CCM and HMAC crypto, COSE/CWT constants and transaction tracking"
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = ["dcaf", "ace", "coap", "cose", "cwt", "aes-ccm", "hmac", "authorization"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["dcafkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
