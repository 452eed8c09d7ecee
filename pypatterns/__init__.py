"""
PyPatterns: classical pattern recognition on fixed-dimension feature vectors.

Three self-contained components over in-memory datasets:

Submodules:
    neighbors: K-nearest-neighbor classification (KnnClassifier)
    decomposition: PCA and LDA dimensionality reduction (PcaReducer, LdaReducer)
    core: FeatureSet, Result envelope, exceptions, linear algebra kernels
"""

__version__ = "0.1.0"

from pypatterns.core import (
    FeatureSet,
    PyPatternsError,
    ValidationError,
    DimensionError,
    InvalidKError,
    NotLoadedError,
    NumericalError,
    SingularMatrixError,
    DegenerateInputError,
    PyPatternsWarning,
    LoadSkippedWarning,
    InvalidKWarning,
)
from pypatterns import neighbors
from pypatterns import decomposition
from pypatterns.neighbors import KnnClassifier, knn_classify
from pypatterns.decomposition import PcaReducer, LdaReducer, pca, lda

__all__ = [
    "__version__",
    "neighbors",
    "decomposition",
    # Components
    "KnnClassifier",
    "PcaReducer",
    "LdaReducer",
    "knn_classify",
    "pca",
    "lda",
    # Data
    "FeatureSet",
    # Errors
    "PyPatternsError",
    "ValidationError",
    "DimensionError",
    "InvalidKError",
    "NotLoadedError",
    "NumericalError",
    "SingularMatrixError",
    "DegenerateInputError",
    "PyPatternsWarning",
    "LoadSkippedWarning",
    "InvalidKWarning",
]
