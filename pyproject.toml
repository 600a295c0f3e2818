[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ninetools"
version = "0.1.0"
description = "Small, terse file and system utilities: cal, cat, cp, ls, du, wc and friends"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "command-line", "utilities", "cal", "ls", "du", "wc"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
9cal = "ninetools.cal:main"
9cat = "ninetools.cat:main"
9chmod = "ninetools.chmod:main"
9chown = "ninetools.chown:main"
9cp = "ninetools.cp:main"
9date = "ninetools.date:main"
9du = "ninetools.du:main"
9echo = "ninetools.echo:main"
9gfetch = "ninetools.gfetch:main"
9kill = "ninetools.kill:main"
9ls = "ninetools.ls:main"
9mkdir = "ninetools.mkdir:main"
9mv = "ninetools.mv:main"
9ps = "ninetools.ps:main"
9pwd = "ninetools.pwd:main"
9rm = "ninetools.rm:main"
9rmdir = "ninetools.rmdir:main"
9sleep = "ninetools.sleep:main"
9touch = "ninetools.touch:main"
9uname = "ninetools.uname:main"
9wc = "ninetools.wc:main"
9whoami = "ninetools.whoami:main"

[tool.hatch.build.targets.wheel]
packages = ["ninetools"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
