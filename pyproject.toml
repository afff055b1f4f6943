[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wireview"
version = "0.1.0"
description = "A small wireframe viewer for Wavefront OBJ models with a free-flying quaternion camera"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["3d", "wireframe", "obj", "quaternion", "camera", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Multimedia :: Graphics :: Viewers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
wireview = "wireview.app:main"

[tool.hatch.build.targets.wheel]
packages = ["wireview"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
