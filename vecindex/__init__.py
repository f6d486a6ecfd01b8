"""Building blocks for vector indexes: configs, datasets, bitsets, thread pools and metadata."""

__version__ = "0.1.0"