[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fenris"
version = "0.1.0"
description = "Building blocks for a file transfer client and server: zlib compression, AES-GCM encryption, ECDH key exchange, file operations and logging"
requires-python = ">=3.10"
keywords = ["file-transfer", "ecdh", "aes-gcm", "hkdf", "zlib", "filesystem", "logging"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: File Transfer Protocol (FTP)",
    "Topic :: Security :: Cryptography",
    "Topic :: System :: Archiving :: Compression",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fenris-client = "fenris.client:main"
fenris-server = "fenris.server:main"

[tool.hatch.build.targets.wheel]
packages = ["fenris"]

[tool.pytest.ini_options]
addopts = "-ra"
