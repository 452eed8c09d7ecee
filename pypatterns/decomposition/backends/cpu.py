"""
CPU backends for PCA and LDA.

Both use LAPACK through SciPy: PCA an SVD of the centered data, LDA a
general eigen-decomposition of Sw^-1 Sb.
"""

from typing import Any
import numpy as np

from pypatterns.core.exceptions import DegenerateInputError, SingularMatrixError
from pypatterns.core.result import Result
from pypatterns.core.compute.timing import Timer
from pypatterns.core.compute.linalg import (
    eig_sorted,
    left_singular_vectors,
    solve_checked,
)
from pypatterns.decomposition.design import PcaDesign, LdaDesign
from pypatterns.decomposition.solution import ProjectionParams
from pypatterns.decomposition._common import clamp_k

# Discarded imaginary parts above this are reported in Result.warnings
_IMAGINARY_WARNING_THRESHOLD = 1e-8


class CPUSVDBackend:
    """
    PCA via SVD of the centered data.

    Implements the Backend protocol for PcaDesign -> ProjectionParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_svd'

    def solve(self, design: PcaDesign, k: int) -> Result[ProjectionParams]:
        """
        Project centered data onto its top-k principal directions.

        Algorithm:
            1. Thin SVD of the centered d x n matrix (left vectors only)
            2. Sign-normalize every direction
            3. Clamp k to [1, d-1]
            4. projected = U_k' X_centered, flattened point-major
        """
        k_requested = k
        k, clamp_message = clamp_k(k, design.d)
        warnings_list: list[str] = []
        if clamp_message is not None:
            warnings_list.append(clamp_message)

        timer = Timer()
        timer.start()

        X = design.centered
        with timer.section('svd'):
            svd = left_singular_vectors(X)

        with timer.section('projection'):
            directions = svd.U[:, :k]
            projected = directions.T @ X
            values = projected.ravel(order='F')

        with timer.section('variance'):
            s = svd.singular_values
            if design.n > 1:
                explained = s ** 2 / (design.n - 1)
            else:
                explained = np.zeros_like(s)
            total = explained.sum()
            ratio = explained / total if total > 0 else np.zeros_like(explained)

        timer.stop()

        params = ProjectionParams(
            values=values,
            projected=projected,
            directions=directions,
            spectrum=s,
            mean=design.means,
            explained_variance=explained,
            explained_variance_ratio=ratio,
        )

        info: dict[str, Any] = {
            'method': 'pca',
            'decomposition': 'svd',
            'k_requested': k_requested,
            'k': k,
            'd': design.d,
            'n': design.n,
            'rank': svd.rank,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )


class CPUEigenBackend:
    """
    LDA via eigen-decomposition of Sw^-1 Sb.

    Implements the Backend protocol for LdaDesign -> ProjectionParams.

    Scatter convention (reproduced exactly, not the size-weighted variant):
        Sw = sum_c (X_c - m_c)(X_c - m_c)' / (n_c - 1)
        Sb = sum_c (m_c - m)(m_c - m)'
    """

    @property
    def name(self) -> str:
        return 'cpu_eig'

    def solve(self, design: LdaDesign, k: int) -> Result[ProjectionParams]:
        """
        Project every class onto the top-k discriminant directions.

        Raises:
            DegenerateInputError: Fewer than two classes, or all class means coincide
            SingularMatrixError: A class has a single point, or Sw is singular
        """
        if design.n_classes < 2:
            raise DegenerateInputError(
                f"LDA needs at least 2 classes, got {design.n_classes}; "
                f"between-class scatter is identically zero",
                n_classes=design.n_classes,
            )

        singletons = [
            label for label, size in zip(design.classes, design.class_sizes) if size < 2
        ]
        if singletons:
            raise SingularMatrixError(
                f"Sw is undefined: classes {singletons!r} have a single point "
                f"(scatter normalizer n_c - 1 = 0)",
                matrix_name='Sw',
                expected_rank=design.d,
            )

        k_requested = k
        k, clamp_message = clamp_k(k, design.d)
        warnings_list: list[str] = []
        if clamp_message is not None:
            warnings_list.append(clamp_message)

        timer = Timer()
        timer.start()

        groups = design.groups
        d = design.d

        with timer.section('means'):
            class_means = np.column_stack([g.mean(axis=1) for g in groups])
            grand_mean = sum(g.sum(axis=1) for g in groups) / design.n

        with timer.section('scatter'):
            Sw = np.zeros((d, d))
            for g, m in zip(groups, class_means.T):
                centered = g - m[:, np.newaxis]
                Sw += centered @ centered.T / (g.shape[1] - 1)

            Sb = np.zeros((d, d))
            for m in class_means.T:
                diff = m - grand_mean
                Sb += np.outer(diff, diff)

        if not np.any(Sb):
            raise DegenerateInputError(
                f"between-class scatter is zero: all {design.n_classes} class means "
                f"coincide, so no direction discriminates between classes",
                n_classes=design.n_classes,
            )

        with timer.section('solve'):
            W = solve_checked(Sw, Sb, matrix_name='Sw')

        with timer.section('eigen'):
            eig = eig_sorted(W)

        if eig.max_imaginary > _IMAGINARY_WARNING_THRESHOLD:
            warnings_list.append(
                f"discarded imaginary eigenvalue parts up to {eig.max_imaginary:.3g}"
            )

        with timer.section('projection'):
            directions = eig.eigenvectors[:, :k]
            projected = np.hstack([directions.T @ g for g in groups])
            values = projected.ravel(order='F')

        timer.stop()

        projected_labels = tuple(
            label
            for label, size in zip(design.classes, design.class_sizes)
            for _ in range(size)
        )

        params = ProjectionParams(
            values=values,
            projected=projected,
            directions=directions,
            spectrum=eig.eigenvalues,
            mean=grand_mean,
            within_scatter=Sw,
            between_scatter=Sb,
            classes=design.classes,
            class_sizes=design.class_sizes,
            class_means=class_means,
            projected_labels=projected_labels,
        )

        info: dict[str, Any] = {
            'method': 'lda',
            'decomposition': 'eig',
            'k_requested': k_requested,
            'k': k,
            'd': d,
            'n': design.n,
            'n_classes': design.n_classes,
            'max_imaginary': eig.max_imaginary,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
