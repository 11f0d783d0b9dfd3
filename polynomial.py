#!/usr/bin/python3
#-*- coding:utf8 -*-

"Univariate polynomials over the integers and over remainder class rings."


from itertools import zip_longest
from functools import reduce
from operator import __add__, __mul__

from utils import superscript, cached, exact_int
from rings import Ring, Integer, Modular


__all__ = 'Polynomial', 'polynomial_ring', 'IntegerPolynomial', 'ModularPolynomial', 'polynomial'


class Polynomial:
	"""
	Univariate polynomial template class. Needs a class attribute `Ring`, the ring of coefficients (see `rings.Ring`).
	Constructor accepts coefficients starting from the constant term, as ints or elements of `Ring`. A polynomial
	over another ring is converted coefficient by coefficient through its integer representatives.

	Coefficients are stored as given, trailing zeros included; the stored length determines the length of sums
	and products. Trailing zeros never affect identity: equality, hashing and `degree` ignore them.
	Polynomials are immutable, all operations return new objects.
	"""

	Ring = None

	@classmethod
	def from_coefficients(cls, coefficients):
		return cls(coefficients)

	@classmethod
	def zero(cls):
		"Zero polynomial, in its minimal representation (no coefficients)."
		return cls(())

	@classmethod
	def one(cls):
		return cls((cls.Ring.one(),))

	@classmethod
	def monomial(cls, degree, coefficient=1):
		"The polynomial `coefficient·xⁿ`."
		return cls((coefficient,)).shift(degree)

	@classmethod
	def random(cls, length, randbelow, bound=None):
		return cls(cls.Ring.random(randbelow, bound) for _n in range(length))

	@classmethod
	def __check_operands(cls, polynomials):
		if cls.Ring is None:
			raise TypeError("`Polynomial` is a template, use `polynomial_ring(Ring)` to get a concrete class.")
		polynomials = list(polynomials)
		for p in polynomials:
			if not isinstance(p, Polynomial):
				raise TypeError(f"Expected a polynomial, got {type(p).__name__}.")
			if p.Ring is not cls.Ring:
				raise ValueError(f"Polynomial over {p.Ring.__name__} in an operation over {cls.Ring.__name__}.")
		return polynomials

	@classmethod
	def sum(cls, addends):
		"Sum of the sequence, folded left to right. Empty sum is `zero()`, a single addend is returned as is."
		addends = cls.__check_operands(addends)
		if not addends:
			return cls.zero()
		return reduce(__add__, addends)

	@classmethod
	def product(cls, factors):
		"Product of the sequence, folded left to right. Empty product is `one()`, a single factor is returned as is."
		factors = cls.__check_operands(factors)
		if not factors:
			return cls.one()
		return reduce(__mul__, factors)

	def __init__(self, coefficients=()):
		if self.Ring is None:
			raise TypeError("`Polynomial` is a template, use `polynomial_ring(Ring)` to get a concrete class.")

		if isinstance(coefficients, Polynomial) and coefficients.Ring is self.Ring:
			self.__coefficients = coefficients.__coefficients
		elif isinstance(coefficients, Polynomial):
			self.__coefficients = tuple(self.Ring(int(_c)) for _c in coefficients.__coefficients)
		else:
			Ring = self.Ring
			self.__coefficients = tuple(_c if (_c.__class__ is Ring) else Ring(_c) for _c in coefficients)

	def __reduce__(self):
		return polynomial, (self.Ring.modulus, [int(_c) for _c in self.__coefficients])

	@property
	def coefficients(self):
		"Stored coefficients, constant term first, trailing zeros included."
		return self.__coefficients

	@property
	def modulus(self):
		return self.Ring.modulus

	def __len__(self):
		return len(self.__coefficients)

	def __iter__(self):
		return iter(self.__coefficients)

	def __getitem__(self, n):
		"Coefficient of `xⁿ`; zero above the stored length."
		n = exact_int(n, "Exponent")
		if n < 0:
			raise IndexError(f"Negative exponent {n}.")
		try:
			return self.__coefficients[n]
		except IndexError:
			return self.Ring.zero()

	@property
	@cached
	def degree(self):
		"Highest exponent with a nonzero coefficient, `-1` for the zero polynomial."
		for n in reversed(range(len(self.__coefficients))):
			if self.__coefficients[n]:
				return n
		return -1

	@property
	def leading_coefficient(self):
		if self.degree < 0:
			return self.Ring.zero()
		return self.__coefficients[self.degree]

	def trimmed(self):
		"Same polynomial with trailing zero coefficients removed."
		return self.__class__(self.__coefficients[:self.degree + 1])

	def shift(self, n):
		"Multiply by `xⁿ`, `n >= 0`."
		n = exact_int(n, "Shift")
		if n < 0:
			raise ValueError(f"Shift must be non-negative (got {n}).")
		return self.__class__((self.Ring.zero(),) * n + self.__coefficients)

	def __call__(self, x):
		"Evaluate at `x` by Horner's rule. Returns an element of `Ring`."
		x = self.Ring(x)
		result = self.Ring.zero()
		for c in reversed(self.__coefficients):
			result = result * x + c
		return result

	def __str__(self):
		if self:
			return " + ".join(f"{str(self[_n])}·x{superscript(_n)}" for _n in reversed(range(self.degree + 1)) if self[_n])
		else:
			return f"{self.Ring.zero()}·x⁰"

	def __repr__(self):
		return f'{self.__class__.__name__}({[int(_c) for _c in self.__coefficients]!r})'

	def __bool__(self):
		return self.degree >= 0

	@cached
	def __hash__(self):
		return hash((self.Ring.modulus, self.__coefficients[:self.degree + 1]))

	def __eq__(self, other):
		if not isinstance(other, Polynomial):
			return NotImplemented
		if other.Ring is not self.Ring:
			return False
		return self.__coefficients[:self.degree + 1] == other.__coefficients[:other.degree + 1]

	def __coerce(self, other):
		"Bring `other` into this polynomial ring: polynomials are checked, scalars become constants. `None` if impossible."

		if isinstance(other, Polynomial):
			if other.Ring is not self.Ring:
				raise ValueError(f"Polynomials over different rings can not be combined ({self.Ring.__name__} and {other.Ring.__name__}).")
			return other

		if isinstance(other, Ring):
			if other.__class__ is not self.Ring:
				raise ValueError(f"Scalar from {other.__class__.__name__} combined with a polynomial over {self.Ring.__name__}.")
			return self.__class__((other,))

		try:
			return self.__class__((exact_int(other),))
		except TypeError:
			return None

	def __pos__(self):
		return self

	def __neg__(self):
		return self.__class__(-_c for _c in self.__coefficients)

	def __add__(self, other):
		other = self.__coerce(other)
		if other is None:
			return NotImplemented
		zero = self.Ring.zero()
		return self.__class__(_a + _b for (_a, _b) in zip_longest(self.__coefficients, other.__coefficients, fillvalue=zero))

	def __radd__(self, other):
		other = self.__coerce(other)
		if other is None:
			return NotImplemented
		return other + self

	def __sub__(self, other):
		other = self.__coerce(other)
		if other is None:
			return NotImplemented
		zero = self.Ring.zero()
		return self.__class__(_a - _b for (_a, _b) in zip_longest(self.__coefficients, other.__coefficients, fillvalue=zero))

	def __rsub__(self, other):
		other = self.__coerce(other)
		if other is None:
			return NotImplemented
		return other - self

	def __mul__(self, other):
		if not isinstance(other, Polynomial):
			scalar = self.__coerce(other)
			if scalar is None:
				return NotImplemented
			c = scalar[0]
			return self.__class__(_a * c for _a in self.__coefficients)

		other = self.__coerce(other)
		a = self.__coefficients
		b = other.__coefficients
		if not a or not b:
			return self.__class__(())

		result = [self.Ring.zero()] * (len(a) + len(b) - 1)
		for m, v in enumerate(a):
			if not v: continue
			for n, w in enumerate(b):
				result[m + n] += v * w
		return self.__class__(result)

	def __rmul__(self, other):
		if isinstance(other, Polynomial):
			return NotImplemented
		return self * other # coefficient rings are commutative

	def __pow__(self, exponent):
		exponent = exact_int(exponent, "Exponent")
		if exponent < 0:
			raise ValueError(f"Polynomials can only be raised to non-negative powers (got {exponent}).")

		result = self.one()
		base = self
		while exponent:
			if exponent & 1:
				result *= base
			exponent >>= 1
			if exponent:
				base *= base
		return result


polynomial_rings = {}


def polynomial_ring(Ring):
	"Concrete polynomial class over the coefficient ring `Ring`. Memoized, so polynomials over the same ring share one class."

	try:
		return polynomial_rings[Ring]
	except KeyError:
		pass

	class PolynomialRing(Polynomial):
		pass

	PolynomialRing.Ring = Ring
	PolynomialRing.__name__ = PolynomialRing.__qualname__ = f'Polynomial_{Ring.__name__}'
	polynomial_rings[Ring] = PolynomialRing
	return PolynomialRing


IntegerPolynomial = polynomial_ring(Integer)
IntegerPolynomial.__name__ = IntegerPolynomial.__qualname__ = 'IntegerPolynomial'


def ModularPolynomial(modulus):
	"Polynomial class over Z/nZ. Invalid moduli raise the errors of `rings.Modular`."
	return polynomial_ring(Modular(modulus))


def polynomial(modulus, coefficients):
	"Polynomial over the integers (`modulus=None`) or Z/nZ with the given coefficients. Used when unpickling."

	if modulus is None:
		return IntegerPolynomial(coefficients)
	else:
		return ModularPolynomial(modulus)(coefficients)


if __debug__:
	import pickle
	from random import randrange

	def polynomial_axioms(x, y, z):
		"Assert the ring axioms on three polynomials over the same coefficient ring."

		P = x.__class__
		zero = P.zero()
		one = P.one()

		assert x + y == y + x
		assert (x + y) + z == x + (y + z)
		assert x * y == y * x
		assert (x * y) * z == x * (y * z)
		assert x * (y + z) == x * y + x * z
		assert (x + y) * z == x * z + y * z

		assert x + zero == x
		assert zero + x == x
		assert x * one == x
		assert one * x == x
		assert not (x * zero)
		assert x - x == zero
		assert x - y == x + (-y)

		assert len(x + y) == max(len(x), len(y))
		if len(x) and len(y):
			assert len(x * y) == len(x) + len(y) - 1
		if x and y and P.Ring.modulus is None:
			assert (x * y).degree == x.degree + y.degree

		assert P.sum([x, y, z]) == (x + y) + z
		assert P.product([x, y, z]) == (x * y) * z

		if P.Ring.modulus is not None:
			for r in (x + y, x * y, x - y, -z, P.sum([x, y, z]), P.product([x, y, z])):
				assert all(0 <= int(_c) < P.Ring.modulus for _c in r)

		for t in range(-3, 4):
			assert (x + y)(t) == x(t) + y(t)
			assert (x * y)(t) == x(t) * y(t)

	def test_polynomials(P, randbelow, verbose=False):
		"Test suite for polynomials over one ring."

		zero = P.zero()
		one = P.one()

		assert zero.degree == -1
		assert P([0, 0, 0]).degree == -1
		assert P([0, 0, 0]) == zero
		assert hash(P([0, 0, 0])) == hash(zero)
		assert P.sum([]) == zero
		assert P.product([]) == one

		for n in range(10):
			x = P.random(randbelow(6), randbelow, 50)
			y = P.random(randbelow(6), randbelow, 50)
			z = P.random(randbelow(6), randbelow, 50)

			polynomial_axioms(x, y, z)

			assert P.sum([x]) is x
			assert P.product([x]) is x
			assert P(list(x) + [0, 0]) == x
			assert pickle.loads(pickle.dumps(x)) == x
			assert pickle.loads(pickle.dumps(x)).__class__ is P

		if verbose: print(" polynomials ok:", P.__name__)

	def polynomial_test_suite(verbose=False):
		if verbose: print("running polynomial test suite")

		test_polynomials(IntegerPolynomial, randrange, verbose)
		for modulus in range(2, 12):
			test_polynomials(ModularPolynomial(modulus), randrange, verbose)

		P5 = ModularPolynomial(5)
		assert list(P5([3, 4]) + P5([4, 3])) == [P5.Ring(2), P5.Ring(2)]

		if verbose: print("polynomials ok")

	__all__ = __all__ + ('polynomial_axioms', 'test_polynomials', 'polynomial_test_suite')


if __debug__ and __name__ == '__main__':
	polynomial_test_suite(verbose=True)
