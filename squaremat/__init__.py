"""Square matrices of real numbers with arithmetic and linear-algebra operators."""

__version__ = "0.1.0"
__all__ = ["matrix", "demo"]