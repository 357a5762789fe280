"""crawlls - language server that resolves links to cached markdown copies."""

__version__ = "0.1.0"
