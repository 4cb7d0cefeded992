"""Team report model, status rollup, and dependency ordering."""

__version__ = "0.2.0"
