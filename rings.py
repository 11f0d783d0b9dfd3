#!/usr/bin/python3
#-*- coding:utf8 -*-

"Exact coefficient rings: the integers and the remainder class rings Z/nZ."


from itertools import product

from utils import subscript, exact_int


__all__ = 'Ring', 'Integer', 'Modular', 'ring_element', 'gcd'


class Ring:
	"""
	Exact coefficient ring template class. Needs a class attribute `modulus`: `None` gives the ring of integers,
	a positive integer `n` gives the remainder class ring Z/nZ.

	Ring elements are immutable. Every element holds the canonical representative of its class, which for Z/nZ
	is an `int` in the range `[0, n)`; results of all operations are reduced again. Elements of different rings
	can not be combined nor passed to each other's constructor (`ValueError`), plain integers are coerced into
	the ring of the other operand.
	"""

	modulus = None

	@classmethod
	def zero(cls):
		return cls(0)

	@classmethod
	def one(cls):
		return cls(1)

	@classmethod
	def sum(cls, addends):
		result = cls.zero()
		for addend in addends:
			result += addend
		return result

	@classmethod
	def product(cls, factors):
		result = cls.one()
		for factor in factors:
			result *= factor
		return result

	@classmethod
	def reduce(cls, value):
		"Map an `int` to the canonical representative of its residue class."
		if cls.modulus is None:
			return value
		return value % cls.modulus

	@classmethod
	def domain(cls):
		"Yield all elements of the ring, in the order of their representatives."
		if cls.modulus is None:
			raise ValueError("The ring of integers is infinite.")
		for value in range(cls.modulus):
			yield cls(value)

	@classmethod
	def random(cls, randbelow, bound=None):
		"Random ring element. Integers need a `bound` and are then drawn from the open interval `(-bound, bound)`."
		if cls.modulus is not None:
			return cls(randbelow(cls.modulus))
		if bound is None:
			raise ValueError("Random integers need a `bound`.")
		return cls(randbelow(2 * bound - 1) - bound + 1)

	def __init__(self, value):
		if isinstance(value, Ring) and value.__class__ is not self.__class__:
			raise ValueError(f"Element of {value.__class__.__name__} can not become an element of {self.__class__.__name__}, convert it with `int()` first.")
		self.__value = self.reduce(exact_int(value, "Ring element value"))

	def __reduce__(self):
		return ring_element, (self.modulus, self.__value)

	def __coerce(self, other):
		"Representative of `other` in this ring, or `None` if `other` is not a ring element nor an integer."

		if isinstance(other, Ring):
			if other.__class__ is not self.__class__:
				raise ValueError(f"Elements of different rings can not be combined ({self.__class__.__name__} and {other.__class__.__name__}).")
			return other.__value

		try:
			return self.reduce(exact_int(other))
		except TypeError:
			return None

	def __str__(self):
		if self.modulus is None:
			return str(self.__value)
		else:
			return str(self.__value) + subscript(self.modulus)

	def __repr__(self):
		return f'{self.__class__.__name__}({self.__value!r})'

	def __bool__(self):
		return bool(self.__value)

	def __int__(self):
		return self.__value

	__index__ = __int__

	def __hash__(self):
		return hash((self.modulus, self.__value))

	def __eq__(self, other):
		if isinstance(other, Ring) and other.__class__ is self.__class__:
			return self.__value == other.__value
		return NotImplemented

	def __pos__(self):
		return self

	def __neg__(self):
		return self.__class__(-self.__value)

	def __add__(self, other):
		value = self.__coerce(other)
		if value is None:
			return NotImplemented
		return self.__class__(self.__value + value)

	__radd__ = __add__

	def __sub__(self, other):
		value = self.__coerce(other)
		if value is None:
			return NotImplemented
		return self.__class__(self.__value - value)

	def __rsub__(self, other):
		value = self.__coerce(other)
		if value is None:
			return NotImplemented
		return self.__class__(value - self.__value)

	def __mul__(self, other):
		value = self.__coerce(other)
		if value is None:
			return NotImplemented
		return self.__class__(self.__value * value)

	__rmul__ = __mul__

	def __pow__(self, exponent):
		exponent = exact_int(exponent, "Exponent")
		if exponent < 0:
			return self.inverse() ** -exponent
		if self.modulus is None:
			return self.__class__(self.__value ** exponent)
		return self.__class__(pow(self.__value, exponent, self.modulus))

	def is_unit(self):
		if self.modulus is None:
			return self.__value in (1, -1)
		return gcd(self.__value, self.modulus) == 1

	def inverse(self):
		"Multiplicative inverse. Zero raises `ZeroDivisionError`, other non-units raise `ArithmeticError`."

		if self.modulus == 1:
			return self # zero ring, 0 == 1

		if not self:
			raise ZeroDivisionError(f"Zero element of {self.__class__.__name__} has no inverse.")

		if not self.is_unit():
			if self.modulus is None:
				raise ArithmeticError(f"Integer {self} has no multiplicative inverse.")
			else:
				raise ArithmeticError(f"{self} is not invertible modulo {self.modulus} (common divisor {gcd(self.__value, self.modulus)}).")

		if self.modulus is None:
			return self
		return self.__class__(pow(self.__value, -1, self.modulus))


class Integer(Ring):
	"Ring of integers, of arbitrary precision."

	modulus = None


modular_rings = {}


def Modular(modulus):
	"Remainder class ring Z/nZ for the modulus `n >= 1`. Rings are memoized: equal moduli give the same class, so the modulus is part of the type of every element."

	modulus = exact_int(modulus, "Modulus")
	if modulus < 1:
		raise ValueError(f"Modulus must be a positive integer (got {modulus}).")

	try:
		return modular_rings[modulus]
	except KeyError:
		pass

	class Modulo(Ring):
		pass

	Modulo.modulus = modulus
	Modulo.__name__ = Modulo.__qualname__ = f'Modular_{modulus}'
	modular_rings[modulus] = Modulo
	return Modulo


def ring_element(modulus, value):
	"Element of the integers (`modulus=None`) or of Z/nZ with the given value. Used when unpickling."

	if modulus is None:
		return Integer(value)
	else:
		return Modular(modulus)(value)


def gcd(a, b):
	"Greatest common divisor of two integers, by Euclid's algorithm. `gcd(a, 0) == abs(a)`."

	a = abs(exact_int(a))
	b = abs(exact_int(b))

	if b == 0:
		return a
	else:
		return gcd(b, a % b)


if __debug__:
	import pickle

	def ring_axioms(x, y, z):
		"Assert the commutative ring axioms on three elements of the same ring."

		Ring = x.__class__
		zero = Ring.zero()
		one = Ring.one()

		assert not zero
		if Ring.modulus != 1:
			assert one
			assert zero != one
			assert x + one != x

		assert x + zero == x
		assert x + y == y + x
		assert (x + y) + z == x + (y + z)

		assert x * zero == zero
		assert x * one == x
		assert x * y == y * x
		assert (x * y) * z == x * (y * z)

		assert -zero == zero
		assert x - x == zero
		assert x - y == x + (-y)

		assert x * (y + z) == x * y + x * z
		assert (x + y) * z == x * z + y * z

		if Ring.modulus is not None:
			for r in (x, y, z, x + y, x * y, x - y, -z):
				assert 0 <= int(r) < Ring.modulus

	def test_ring(Ring, randbelow, verbose=False):
		"Test suite for one ring."

		zero = Ring.zero()
		one = Ring.one()

		assert pickle.loads(pickle.dumps(one)) == one
		assert pickle.loads(pickle.dumps(zero)).__class__ is Ring
		assert hash(pickle.loads(pickle.dumps(one))) == hash(one)

		assert Ring.sum([]) == zero
		assert Ring.product([]) == one

		if Ring.modulus is not None:
			assert Ring.sum([one] * Ring.modulus) == zero
			assert Ring.sum([one] * (Ring.modulus + 1)) == one

			for n in range(-2 * Ring.modulus, 2 * Ring.modulus):
				assert int(Ring(n)) == n % Ring.modulus

			if Ring.modulus <= 7:
				for x, y, z in product(Ring.domain(), repeat=3):
					ring_axioms(x, y, z)

			for x in Ring.domain():
				if x.is_unit():
					assert x * x.inverse() == one
					assert x ** -1 == x.inverse()

		for n in range(20):
			x = Ring.random(randbelow, 1000)
			y = Ring.random(randbelow, 1000)
			z = Ring.random(randbelow, 1000)
			ring_axioms(x, y, z)

		if verbose: print(" ring ok:", Ring.__name__)

	def rings_test_suite(verbose=False):
		from random import randrange

		if verbose: print("running rings test suite")

		test_ring(Integer, randrange, verbose)
		for modulus in range(1, 32):
			test_ring(Modular(modulus), randrange, verbose)

		for a, b, d in [(13, 4, 1), (84, 144, 12), (426426, 5184, 6), (134, 426, 2), (0, 71, 71), (23, 0, 23)]:
			assert gcd(a, b) == d

		if verbose: print("rings ok")

	__all__ = __all__ + ('ring_axioms', 'test_ring', 'rings_test_suite')


if __debug__ and __name__ == '__main__':
	rings_test_suite(verbose=True)
