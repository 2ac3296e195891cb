"""Invoice records with offline-capable storage and template PDF filling."""

__version__ = "0.1.0"
