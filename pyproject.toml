[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "imaptypes"
version = "3.0.0a15"
description = "Typed values for IMAP responses: flags, mailboxes, fetches, ACLs, quotas and more"
requires-python = ">=3.10"
dependencies = []
keywords = ["imap", "email", "mail", "protocol", "rfc3501"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Email :: Post-Office :: IMAP",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["imaptypes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
