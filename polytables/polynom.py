"""Monomials in three variables and polynomials built from them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterable, Iterator


class DegreeError(ValueError):
    """Raised when a monomial degree falls outside the allowed range."""


@dataclass(frozen=True)
class Monom:
    """A term ``k * x^a * y^b * z^c`` with the degree packed as ``abc``.

    Each of the three exponents is a single decimal digit, so the packed
    degree is ``100 * a + 10 * b + c``.
    """

    degree: int = 0
    k: float = 0.0

    MAX_DEG: ClassVar[int] = 9

    def __post_init__(self) -> None:
        if self.degree < 0 or not self._is_degree_correct():
            raise DegreeError("Degree is out of range")

    def _is_degree_correct(self) -> bool:
        return all(
            d <= self.MAX_DEG for d in (self.x_deg(), self.y_deg(), self.z_deg())
        )

    def x_deg(self) -> int:
        """Exponent of x."""
        return self.degree // 100

    def y_deg(self) -> int:
        """Exponent of y."""
        return (self.degree // 10) % 10

    def z_deg(self) -> int:
        """Exponent of z."""
        return self.degree % 10

    @staticmethod
    def _normalised(degree: int, k: float) -> Monom:
        return Monom() if k == 0 else Monom(degree, k)

    def __add__(self, other: object) -> Monom:
        if not isinstance(other, Monom):
            return NotImplemented
        if self.degree != other.degree:
            raise ValueError("cannot add monomials of different degrees")
        return self._normalised(self.degree, self.k + other.k)

    def __sub__(self, other: object) -> Monom:
        if not isinstance(other, Monom):
            return NotImplemented
        if self.degree != other.degree:
            raise ValueError("cannot subtract monomials of different degrees")
        return self._normalised(self.degree, self.k - other.k)

    def __mul__(self, other: object) -> Monom:
        if isinstance(other, Monom):
            fits = (
                self.x_deg() + other.x_deg() <= self.MAX_DEG
                and self.y_deg() + other.y_deg() <= self.MAX_DEG
                and self.z_deg() + other.z_deg() <= self.MAX_DEG
            )
            if not fits:
                raise DegreeError("product degree is out of range")
            return self._normalised(self.degree + other.degree, self.k * other.k)
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return self._normalised(self.degree, self.k * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Monom:
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return self * other
        return NotImplemented


class Polynom:
    """An ordered sequence of monomials, kept by degree from highest to lowest."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, monoms: Iterable[Monom] = ()) -> None:
        self._monoms: list[Monom] = list(monoms)

    def __iter__(self) -> Iterator[Monom]:
        return iter(self._monoms)

    def __len__(self) -> int:
        return len(self._monoms)

    def __repr__(self) -> str:
        return f"Polynom({self._monoms!r})"

    def append(self, monom: Monom) -> None:
        """Add a monomial at the end."""
        self._monoms.append(monom)

    def __add__(self, other: object) -> Polynom:
        if not isinstance(other, Polynom):
            return NotImplemented
        left, right = self._monoms, other._monoms
        i = j = 0
        result = Polynom()
        while i < len(left) and j < len(right):
            a, b = left[i], right[j]
            if a.degree == b.degree:
                result.append(a + b)
                i += 1
                j += 1
            elif a.degree > b.degree:
                result.append(a)
                i += 1
            else:
                result.append(b)
                j += 1
        result._monoms.extend(left[i:])
        result._monoms.extend(right[j:])
        return result

    def __mul__(self, other: object) -> Polynom:
        if isinstance(other, Polynom):
            result = Polynom()
            for monom in self._monoms:
                result = result + other * monom
            return result
        if isinstance(other, Monom) or (
            isinstance(other, (int, float)) and not isinstance(other, bool)
        ):
            return Polynom(m * other for m in self._monoms)
        return NotImplemented

    def __rmul__(self, other: object) -> Polynom:
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return self * other
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynom):
            return NotImplemented
        return self._monoms == other._monoms