[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "itzamna"
version = "0.1.0"
description = "Software rasterizer, fast approximate math, small utilities and minimum spanning tree algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "rasterizer",
    "framebuffer",
    "graphics",
    "vector math",
    "fast trigonometry",
    "graph",
    "hypergraph",
    "minimum spanning tree",
    "kruskal",
    "prim",
    "boruvka",
]
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
    "Topic :: Multimedia :: Graphics",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
itzamna-mst-demo = "itzamna.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["itzamna"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
