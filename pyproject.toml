[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cwmcp"
version = "0.1.0"
description = "Tool server that lists deployments and schemas of a CosmWasm contract and builds its query and execute messages"
requires-python = ">=3.10"
dependencies = []
keywords = ["mcp", "cosmwasm", "cosmos", "smart-contract", "json-rpc"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cwmcp = "cwmcp.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cwmcp"]

[tool.pytest.ini_options]
addopts = "-ra"
