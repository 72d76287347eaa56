"""locextract: extract localizable strings from Objective-C sources."""

__version__ = "0.3.0"
