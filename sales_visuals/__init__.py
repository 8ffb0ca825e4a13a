"""Sales visual encoding pipeline and chart rendering."""

__version__ = "0.1.0"
