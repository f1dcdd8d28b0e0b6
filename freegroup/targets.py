# Freegroup: Free Group Word Canonicalizer
# Licensed under the Apache License, Version 2.0

"""Target groups for :func:`freegroup.lift.lift`.

A target is any object implementing :class:`Group`. The free group itself,
additive groups, permutation groups and matrix groups over torch tensors
are provided.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Sequence, Tuple

import torch

from freegroup.free_group import FreeGroupElement, one


class Group(ABC):
    """Associative multiplication with identity and inverses."""

    @abstractmethod
    def one(self) -> Any:
        """Identity element."""
        pass

    @abstractmethod
    def mul(self, a: Any, b: Any) -> Any:
        """Group product ``a * b``."""
        pass

    @abstractmethod
    def inv(self, a: Any) -> Any:
        """Inverse of ``a``."""
        pass

    def equal(self, a: Any, b: Any) -> bool:
        return a == b


class AdditiveGroup(Group):
    """Any type with ``+`` and unary ``-``, written multiplicatively.

    ``AdditiveGroup()`` is the integers under addition.
    """

    def __init__(self, zero: Any = 0):
        self.zero = zero

    def one(self):
        return self.zero

    def mul(self, a, b):
        return a + b

    def inv(self, a):
        return -a


class FreeGroupTarget(Group):
    """The free group as a lift target; used by ``map_generators`` and ``bind``."""

    def one(self) -> FreeGroupElement:
        return one()

    def mul(self, a: FreeGroupElement, b: FreeGroupElement) -> FreeGroupElement:
        return a * b

    def inv(self, a: FreeGroupElement) -> FreeGroupElement:
        return ~a


FREE_GROUP = FreeGroupTarget()


class PermutationGroup(Group):
    """Symmetric group on ``{0, ..., n-1}``.

    A permutation is a tuple ``p`` with ``p[i]`` the image of ``i``; the
    product ``mul(p, q)`` applies ``q`` first, then ``p``.
    """

    def __init__(self, n: int):
        assert n >= 0, f"n must be non-negative, got {n}"
        self.n = n

    def one(self) -> Tuple[int, ...]:
        return tuple(range(self.n))

    def mul(self, p, q):
        return tuple(p[q[i]] for i in range(self.n))

    def inv(self, p):
        out = [0] * self.n
        for i, image in enumerate(p):
            out[image] = i
        return tuple(out)


class MatrixGroup(Group):
    """Invertible ``n x n`` matrices as torch tensors.

    Integer dtypes are supported for unimodular matrices: the inverse is
    computed in float64 and rounded back.

    Attributes:
        n (int): Matrix size.
        dtype (torch.dtype): Element dtype.
        device (str): Computation device.
        atol (float): Tolerance of :meth:`equal` for floating dtypes.
    """

    def __init__(self, n: int, dtype: torch.dtype = torch.float64,
                 device: str = 'cpu', atol: float = 1e-8):
        assert n >= 1, f"n must be positive, got {n}"
        self.n = n
        self.dtype = dtype
        self.device = device
        self.atol = atol

    def one(self) -> torch.Tensor:
        return torch.eye(self.n, dtype=self.dtype, device=self.device)

    def mul(self, a: torch.Tensor, b: torch.Tensor) -> torch.Tensor:
        return a @ b

    def inv(self, a: torch.Tensor) -> torch.Tensor:
        if a.dtype.is_floating_point:
            return torch.linalg.inv(a)
        return torch.linalg.inv(a.to(torch.float64)).round().to(a.dtype)

    def equal(self, a: torch.Tensor, b: torch.Tensor) -> bool:
        if a.dtype.is_floating_point:
            return torch.allclose(a, b, atol=self.atol)
        return torch.equal(a, b)

    def tensor(self, rows: Sequence[Sequence[float]]) -> torch.Tensor:
        """Builds a matrix of this group's dtype and device."""
        return torch.tensor(rows, dtype=self.dtype, device=self.device)


def sanov_generators(group: MatrixGroup, alphabet: Sequence[Any] = ("a", "b")) -> Dict[Any, torch.Tensor]:
    """Images of two generators under Sanov's faithful map into ``SL(2, Z)``.

    ``a -> [[1, 2], [0, 1]]`` and ``b -> [[1, 0], [2, 1]]`` generate a free
    subgroup, so the lifted homomorphism is injective: distinct reduced
    words give distinct matrices.

    Args:
        group (MatrixGroup): A 2x2 matrix group.
        alphabet: The two generators to map.

    Returns:
        Dict: Generator to matrix.
    """
    assert group.n == 2, f"Sanov matrices are 2x2, got n={group.n}"
    a, b = alphabet
    return {
        a: group.tensor([[1, 2], [0, 1]]),
        b: group.tensor([[1, 0], [2, 1]]),
    }
