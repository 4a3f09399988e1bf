"""Tool server that lists a CosmWasm contract's deployments and schemas and builds its query and execute messages."""

__version__ = "0.1.0"
__all__ = ["__version__"]