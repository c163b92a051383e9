"""Random walk simulations, balanced sequences, cosine distances and matrix products."""

__version__ = "0.1.0"