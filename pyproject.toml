[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "corpuskit"
version = "0.1.0"
description = "Small text-corpus tools: word frequency ranks, actor co-star paths and word range counts"
requires-python = ">=3.10"
dependencies = []
keywords = ["corpus", "word frequency", "ranking", "graph", "bfs", "avl tree", "range query"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Indexing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bard = "corpuskit.bard:main"
sixdegrees = "corpuskit.sixdegrees:main"
wordrange = "corpuskit.wordrange:main"

[tool.hatch.build.targets.wheel]
packages = ["corpuskit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
