[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minipix"
version = "0.1.0"
description = "Windows with framebuffers, pixel drawing, XPM image loading and event hooks for small graphical programs"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["graphics", "pixels", "xpm", "framebuffer", "events", "teaching"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
minipix-demo = "minipix.examples:main"

[tool.hatch.build.targets.wheel]
packages = ["minipix"]

[tool.pytest.ini_options]
addopts = "-ra"
