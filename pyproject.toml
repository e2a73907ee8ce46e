[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mysqlexport"
version = "0.1.0"
description = "Export a MySQL database's table and view structure and a sample of its data to SQL files, optionally zipped."
requires-python = ">=3.10"
keywords = ["mysql", "export", "dump", "sql", "schema", "backup"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
]
dependencies = [
    "pymysql",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mysqlexport = "mysqlexport.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mysqlexport"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
