"""DataMiner version handling, DevPack lookups and shared helpers."""

__version__ = "0.1.0"
