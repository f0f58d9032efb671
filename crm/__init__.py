"""
CRM - Customer Record Manager

Console customer records persisted to a delimited text file.

Modules:
    core        - Shared services (config, logging, paths, output)
    customers   - Customer records, codec, file storage, store, menu session
    cli         - Typer entry point
"""

__version__ = "0.1.0"
