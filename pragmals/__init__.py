"""Language server for GHC pragmas."""

__version__ = "0.1.0"
