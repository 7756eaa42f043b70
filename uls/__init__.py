"""An ls-style directory lister with long, column and single-column output."""

__version__ = "0.1.0"