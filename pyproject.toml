[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "udpnotifier"
version = "0.1.0"
description = "Broadcast short text notifications over UDP on a local network and receive them on other machines"
requires-python = ">=3.10"
dependencies = []
keywords = ["udp", "broadcast", "notifications", "lan", "messaging"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
udpnotifier-send = "udpnotifier.sender:main"
udpnotifier-receive = "udpnotifier.receiver:main"

[tool.hatch.build.targets.wheel]
packages = ["udpnotifier"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
