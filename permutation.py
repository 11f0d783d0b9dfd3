#!/usr/bin/python3
#-*- coding:utf8 -*-

"Permutations of finite sets `{0, ..., k - 1}`."


from itertools import permutations
from math import lcm
from functools import reduce
from operator import __matmul__

from utils import cached, exact_int


__all__ = 'Permutation',


class Permutation:
	"""
	Bijection of the set `{0, ..., k - 1}` onto itself, stored as the sequence of images: position `i` holds `p(i)`.

	Composition is written `p @ q` and applies `q` first: `(p @ q)(i) == p(q(i))`. Inversion and conjugation
	follow the same convention, `p.conjugate(g) == g @ p @ g.inverse()`.

	Permutations are immutable. Cycle decomposition, cycle type and signum are derived from the images on demand
	and cached.
	"""

	@classmethod
	def __from_images(cls, images):
		"Build from an image tuple already known to be a bijection."
		result = object.__new__(cls)
		result.__images = tuple(images)
		return result

	@staticmethod
	def __valid_size(size):
		size = exact_int(size, "Permutation size")
		if size < 0:
			raise ValueError(f"Permutation size must be non-negative (got {size}).")
		return size

	@classmethod
	def identity(cls, size):
		return cls.__from_images(range(cls.__valid_size(size)))

	@classmethod
	def transposition(cls, size, i, j):
		"Permutation of `size` elements swapping `i` and `j`. With `i == j` it is the identity, `i` must still be in range."
		return cls.from_cycles([(i, j)] if i != j else [(i,)], size)

	@classmethod
	def from_cycles(cls, cycles, size=None):
		"""
		Build a permutation from disjoint cycles, each a sequence `(a, b, c, ...)` meaning `a -> b -> c -> ... -> a`.
		Elements not mentioned are fixed points. If `size` is not given, it is one more than the largest element.
		"""

		cycles = [[exact_int(_i, "Cycle element") for _i in _cycle] for _cycle in cycles]

		if size is None:
			size = max((max(_cycle) for _cycle in cycles if _cycle), default=-1) + 1
		else:
			size = cls.__valid_size(size)

		images = list(range(size))
		seen = set()
		for cycle in cycles:
			for i in cycle:
				if not 0 <= i < size:
					raise ValueError(f"Cycle element {i} outside of the domain of a permutation of size {size}.")
				if i in seen:
					raise ValueError(f"Element {i} appears more than once in cycles {cycles}.")
				seen.add(i)

			for pos, i in enumerate(cycle):
				images[i] = cycle[(pos + 1) % len(cycle)]

		return cls.__from_images(images)

	@classmethod
	def domain(cls, size):
		"Yield all permutations of `size` elements, in lexicographic order of their images."
		size = cls.__valid_size(size)
		for images in permutations(range(size)):
			yield cls.__from_images(images)

	@classmethod
	def random(cls, size, randbelow):
		"Uniformly random permutation (Fisher-Yates shuffle driven by `randbelow`)."
		size = cls.__valid_size(size)
		images = list(range(size))
		for n in reversed(range(1, size)):
			m = randbelow(n + 1)
			images[n], images[m] = images[m], images[n]
		return cls.__from_images(images)

	@classmethod
	def product(cls, factors, size):
		"Composition `f₀ @ f₁ @ ...` of the sequence, folded left to right. Empty product is the identity of `size` elements."
		return reduce(__matmul__, factors, cls.identity(size))

	def __init__(self, images=()):
		images = tuple(exact_int(_i, "Permutation image") for _i in images)
		size = len(images)

		seen = [False] * size
		for i in images:
			if not 0 <= i < size:
				raise ValueError(f"Image {i} outside of the domain of a permutation of size {size}: {list(images)}.")
			if seen[i]:
				raise ValueError(f"Image {i} appears more than once, not a bijection: {list(images)}.")
			seen[i] = True

		self.__images = images

	@property
	def images(self):
		return self.__images

	@property
	def size(self):
		return len(self.__images)

	def __len__(self):
		return len(self.__images)

	def __iter__(self):
		return iter(self.__images)

	def __call__(self, i):
		"Image of `i`. Arguments outside of the domain raise `IndexError`."
		i = exact_int(i, "Permutation argument")
		if not 0 <= i < len(self.__images):
			raise IndexError(f"{i} is outside of the domain of a permutation of size {len(self.__images)}.")
		return self.__images[i]

	def apply(self, sequence):
		"Rearrange `sequence` so that the element at position `i` moves to position `p(i)`."
		sequence = list(sequence)
		if len(sequence) != len(self.__images):
			raise ValueError(f"Sequence length does not match permutation size ({len(sequence)} vs. {len(self.__images)}).")
		result = [None] * len(sequence)
		for i, x in enumerate(sequence):
			result[self.__images[i]] = x
		return result

	def __str__(self):
		"Cycle notation without fixed points, `()` for the identity."
		moved = [_cycle for _cycle in self.cycles() if len(_cycle) > 1]
		if not moved:
			return "()"
		return "".join("(" + " ".join(str(_i) for _i in _cycle) + ")" for _cycle in moved)

	def __repr__(self):
		return f'{self.__class__.__name__}({list(self.__images)!r})'

	def __hash__(self):
		return hash(self.__images)

	def __eq__(self, other):
		try:
			return self.__images == other.__images
		except AttributeError:
			return NotImplemented

	def __check_size(self, other):
		if len(self.__images) != len(other.__images):
			raise ValueError(f"Permutation sizes don't match ({len(self.__images)} vs. {len(other.__images)}).")

	def __matmul__(self, other):
		"Composition, `(self @ other)(i) == self(other(i))`."
		if not isinstance(other, Permutation):
			return NotImplemented
		self.__check_size(other)
		images = self.__images
		return self.__from_images(images[_j] for _j in other.__images)

	compose = __matmul__

	def inverse(self):
		result = [0] * len(self.__images)
		for i, j in enumerate(self.__images):
			result[j] = i
		return self.__from_images(result)

	def conjugate(self, g):
		"The permutation `g @ self @ g.inverse()`."
		self.__check_size(g)
		return g @ self @ g.inverse()

	def __pow__(self, exponent):
		"Repeated composition; negative exponents are powers of the inverse."
		exponent = exact_int(exponent, "Exponent")
		result = list(self.__images)
		for cycle in self.cycles():
			for pos, i in enumerate(cycle):
				result[i] = cycle[(pos + exponent) % len(cycle)]
		return self.__from_images(result)

	def is_identity(self):
		return all(_i == _j for (_i, _j) in enumerate(self.__images))

	@cached
	def cycles(self):
		"""
		Cycle decomposition, fixed points included as 1-element cycles. Every cycle starts at its smallest element
		and continues in orbit order; cycles are ordered by their smallest element.
		"""

		images = self.__images
		visited = [False] * len(images)
		cycles = []

		for start in range(len(images)):
			if visited[start]: continue

			cycle = []
			i = start
			while not visited[i]:
				visited[i] = True
				cycle.append(i)
				i = images[i]
			cycles.append(tuple(cycle))

		return tuple(cycles)

	def cycle_type(self):
		"Sorted lengths of all cycles."
		return tuple(sorted(len(_cycle) for _cycle in self.cycles()))

	def order(self):
		"Smallest positive `n` with `p ** n` equal to the identity."
		return lcm(*(len(_cycle) for _cycle in self.cycles()))

	def signum(self):
		"Parity: `+1` for even and `-1` for odd permutations."
		return -1 if (len(self.__images) - len(self.cycles())) % 2 else 1

	def transpositions(self):
		"""
		Decomposition into transpositions `[(a, b), ...]` such that composing `transposition(k, a, b)` of the list
		from left to right with `@` gives back the permutation. Each cycle of length `L` gives `L - 1` of them.
		"""

		result = []
		for cycle in self.cycles():
			head = cycle[0]
			for i in reversed(cycle[1:]):
				result.append((head, i))
		return result


if __debug__:
	from random import randrange

	def permutation_axioms(p, q, r):
		"Assert the group axioms and derived view invariants on three permutations of equal size."

		k = len(p)
		e = Permutation.identity(k)

		assert (p @ q) @ r == p @ (q @ r)
		assert p @ e == p
		assert e @ p == p

		assert p @ p.inverse() == e
		assert p.inverse() @ p == e
		assert p.inverse().inverse() == p

		for i in range(k):
			assert (p @ q)(i) == p(q(i))

		assert Permutation.from_cycles(p.cycles(), k) == p
		assert sorted(_i for _cycle in p.cycles() for _i in _cycle) == list(range(k))
		for cycle in p.cycles():
			assert cycle[0] == min(cycle)
		assert [_cycle[0] for _cycle in p.cycles()] == sorted(_cycle[0] for _cycle in p.cycles())

		assert p.conjugate(q).cycle_type() == p.cycle_type()
		assert p.conjugate(q) == q @ p @ q.inverse()

		assert (p @ q).signum() == p.signum() * q.signum()
		assert p.inverse().signum() == p.signum()

		t = p.transpositions()
		assert Permutation.product((Permutation.transposition(k, _a, _b) for (_a, _b) in t), k) == p
		assert p.signum() == (-1) ** len(t)

		assert p ** p.order() == e
		assert p ** -1 == p.inverse()
		assert p ** 2 == p @ p

	def permutation_test_suite(verbose=False):
		if verbose: print("running permutation test suite")

		for k in range(5):
			if verbose: print(" exhaustive, size", k)
			elements = list(Permutation.domain(k))
			for p in elements:
				for q in elements:
					permutation_axioms(p, q, elements[randrange(len(elements))])

		for k in range(5, 40):
			if verbose: print(" random, size", k)
			for n in range(10):
				permutation_axioms(Permutation.random(k, randrange), Permutation.random(k, randrange), Permutation.random(k, randrange))

		try:
			Permutation([0, 0])
		except ValueError:
			pass
		else:
			assert False, "Expected ValueError for a non-bijective image sequence."

		if verbose: print("permutations ok")

	__all__ = __all__ + ('permutation_axioms', 'permutation_test_suite')


if __debug__ and __name__ == '__main__':
	permutation_test_suite(verbose=True)
