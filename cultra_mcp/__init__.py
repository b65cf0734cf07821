"""Code intelligence building blocks: configuration, stdio transport, symbol records, parameter parsing and LSP types."""

__version__ = "1.0.0"