"""Dimensionality reduction backends."""

from pypatterns.decomposition.backends.cpu import CPUSVDBackend, CPUEigenBackend

__all__ = ["CPUSVDBackend", "CPUEigenBackend"]
