"""Canvas toys on an in-memory DOM: Game of Life, Pong and a prime factorization chart."""

__version__ = "0.1.0"