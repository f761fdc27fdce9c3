[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "superchim"
version = "1.0.0"
description = "A side-scrolling flappy-bird style arcade game built on pygame"
requires-python = ">=3.10"
dependencies = [
    "pygame>=2.1",
]
keywords = ["game", "arcade", "flappy", "pygame", "side-scroller"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
]

[project.scripts]
superchim = "superchim.main:main"

[tool.setuptools.packages.find]
include = ["superchim*"]

[tool.pytest.ini_options]
addopts = "-ra"
