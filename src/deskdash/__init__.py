"""deskdash: launcher shortcuts and a note board over a small HTTP service."""

__version__ = "0.1.0"
