[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graylab"
version = "0.1.0"
description = "Grayscale image processing: gamma, Gaussian blur, edge detection, histograms and equalization"
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "pillow",
]
keywords = [
    "image-processing",
    "grayscale",
    "histogram",
    "equalization",
    "gaussian-blur",
    "edge-detection",
    "canny",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
graylab-basics = "graylab.basics:main"
graylab-histogram = "graylab.histogram:main"

[tool.hatch.build.targets.wheel]
packages = ["graylab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
