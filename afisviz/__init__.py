"""Visual transparency for fingerprint-recognition pipeline artifacts."""

__version__ = "0.1.0"
