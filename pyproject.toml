[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raygame"
version = "0.1.0"
description = "Software raycasting renderer core: textures, pixel buffers, wall and sprite casting, input, HUD and minimap"
requires-python = ">=3.10"
keywords = ["raycasting", "game", "renderer", "first-person", "texture", "minimap"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: First Person Shooters",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["raygame"]

[tool.pytest.ini_options]
addopts = "-ra"
