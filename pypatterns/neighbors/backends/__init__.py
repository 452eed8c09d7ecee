"""KNN backends."""

from pypatterns.neighbors.backends.cpu import CPUBruteForceBackend

__all__ = ["CPUBruteForceBackend"]
