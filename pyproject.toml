[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "biblio"
version = "0.1.0"
description = "Read, search and extend a simple BibTeX-style bibliography file"
requires-python = ">=3.10"
dependencies = []
keywords = ["bibliography", "bibtex", "harvard", "references", "citations"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: LaTeX",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
biblio = "biblio.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["biblio"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
