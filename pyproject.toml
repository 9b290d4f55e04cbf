[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mos6502emu"
version = "0.1.0"
description = "A small MOS 6502 CPU emulator with memory, bus and LDA instructions"
requires-python = ">=3.10"
dependencies = []
keywords = ["6502", "emulator", "cpu", "mos6502", "retro"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mos6502emu = "mos6502emu.system:main"

[tool.hatch.build.targets.wheel]
packages = ["mos6502emu"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
