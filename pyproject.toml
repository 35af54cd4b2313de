[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jobtracker"
version = "0.1.0"
description = "A desktop tracker for job applications, with search, status filters and sorting"
requires-python = ">=3.10"
dependencies = []
keywords = ["job", "tracker", "career", "application", "gui", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Environment :: MacOS X",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
jobtracker = "jobtracker.app:main"

[tool.hatch.build.targets.wheel]
packages = ["jobtracker"]

[tool.pytest.ini_options]
addopts = "-ra"
