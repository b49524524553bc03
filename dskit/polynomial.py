"""Dense and sparse polynomials with evaluation, addition and display."""

from dataclasses import dataclass

from dskit.errors import CapacityError, InvalidPositionError

MAX_DEGREE = 1001
MAX_TERMS = 80


class Polynomial:
    """A polynomial stored as coefficients from the constant term upward."""

    __slots__ = ("_coefs",)

    def __init__(self, coefs):
        coefs = tuple(float(c) for c in coefs)
        if not coefs:
            raise ValueError("a polynomial needs at least one coefficient")
        if len(coefs) > MAX_DEGREE:
            raise CapacityError()
        self._coefs = coefs

    @property
    def degree(self):
        """The highest exponent stored."""
        return len(self._coefs) - 1

    @property
    def coefs(self):
        """The coefficients, constant term first."""
        return self._coefs

    def coefficient(self, i):
        """Return the coefficient of ``x**i`` (0 beyond the degree)."""
        if i < 0:
            raise InvalidPositionError()
        return self._coefs[i] if i <= self.degree else 0.0

    def evaluate(self, x):
        """Return the value of the polynomial at ``x``."""
        result = self._coefs[0]
        power = 1.0
        for coef in self._coefs[1:]:
            power *= x
            result += coef * power
        return result

    def __add__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        degree = max(self.degree, other.degree)
        return Polynomial(
            self.coefficient(i) + other.coefficient(i) for i in range(degree + 1)
        )

    def format(self, label):
        """Return the polynomial as text, highest power first."""
        parts = [f" {label}"]
        parts.extend(
            f"{self._coefs[i]:5.1f} x^{i} + " for i in range(self.degree, 0, -1)
        )
        parts.append(f"{self._coefs[0]:4.1f}")
        return "".join(parts)

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._coefs == other._coefs

    def __hash__(self):
        return hash(self._coefs)

    def __repr__(self):
        return f"Polynomial({list(self._coefs)!r})"


@dataclass(frozen=True)
class Term:
    """One term ``coef * x**expo`` of a sparse polynomial."""

    expo: int
    coef: float


class SparsePolynomial:
    """A polynomial stored as terms in strictly descending exponent order."""

    __slots__ = ("_terms",)

    def __init__(self, terms):
        terms = tuple(terms)
        if len(terms) > MAX_TERMS:
            raise CapacityError()
        for higher, lower in zip(terms, terms[1:]):
            if higher.expo <= lower.expo:
                raise ValueError("terms must be in strictly descending exponent order")
        self._terms = terms

    @property
    def terms(self):
        """The terms, highest exponent first."""
        return self._terms

    def evaluate(self, x):
        """Return the value of the polynomial at ``x``."""
        return sum(term.coef * x**term.expo for term in self._terms)

    def __add__(self, other):
        if not isinstance(other, SparsePolynomial):
            return NotImplemented
        a, b = self._terms, other._terms
        result = []
        i = j = 0
        while i < len(a) or j < len(b):
            if i == len(a) or (j < len(b) and a[i].expo < b[j].expo):
                result.append(b[j])
                j += 1
            elif j == len(b) or a[i].expo > b[j].expo:
                result.append(a[i])
                i += 1
            else:
                result.append(Term(a[i].expo, a[i].coef + b[j].coef))
                i += 1
                j += 1
        return SparsePolynomial(result)

    def format(self, label):
        """Return the polynomial as text, highest power first."""
        parts = [label]
        last = len(self._terms) - 1
        for index, term in enumerate(self._terms):
            parts.append(f"{term.coef:5.1f}")
            if term.expo > 0:
                parts.append(f" x^{term.expo} ")
                if index != last:
                    parts.append("+ ")
        return "".join(parts)

    def __eq__(self, other):
        if not isinstance(other, SparsePolynomial):
            return NotImplemented
        return self._terms == other._terms

    def __hash__(self):
        return hash(self._terms)

    def __repr__(self):
        return f"SparsePolynomial({list(self._terms)!r})"