[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pcf8563"
version = "0.1.2"
description = "Driver for the NXP PCF8563 real-time clock over I2C."
requires-python = ">=3.10"
dependencies = []
keywords = ["pcf8563", "rtc", "real-time clock", "driver", "i2c"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware :: Hardware Drivers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pcf8563 = "pcf8563.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pcf8563"]

[tool.pytest.ini_options]
addopts = "-ra"
