[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ungoliant"
version = "0.1.0"
description = "Building blocks for web-crawled text corpora: document types, annotators, sentence filters, Zipf statistics, compression and packaging."
requires-python = ">=3.10"
dependencies = []
keywords = ["corpus", "nlp", "commoncrawl", "oscar", "annotation", "linguistics", "zipf"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ungoliant"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
