#!/usr/bin/python3
#-*- coding:utf8 -*-


import pickle
from random import randrange

import pytest

from rings import Ring, Integer, Modular, gcd, ring_axioms, rings_test_suite


def test_suite():
	rings_test_suite()


def test_modular_rings_are_memoized():
	assert Modular(5) is Modular(5)
	assert Modular(5) is not Modular(7)
	assert Modular(5).modulus == 5
	assert issubclass(Modular(5), Ring)
	assert Modular(5).__name__ == 'Modular_5'


def test_canonical_representatives():
	F = Modular(5)
	assert int(F(7)) == 2
	assert int(F(-1)) == 4
	assert int(F(3) + F(4)) == 2
	assert int(F(2) - F(4)) == 3
	assert int(F(3) * F(4)) == 2
	assert int(-F(1)) == 4
	assert int(F(2) ** 10) == 1024 % 5
	for x in F.domain():
		assert 0 <= int(x) < 5


def test_integers_are_exact():
	a = Integer(2) ** 200
	assert int(a) == 2 ** 200
	assert int(a * a - a) == 2 ** 400 - 2 ** 200
	assert int(Integer(-3)) == -3


def test_int_operands_are_coerced():
	F = Modular(7)
	assert F(3) + 5 == F(1)
	assert 5 + F(3) == F(1)
	assert 10 - F(3) == F(0)
	assert 2 * F(4) == F(1)


def test_zero_and_one():
	for R in (Integer, Modular(2), Modular(10)):
		assert R.zero() == R(0)
		assert R.one() == R(1)
		assert not R.zero()
		assert R.one()
		assert R.sum([]) == R.zero()
		assert R.product([]) == R.one()
	assert Modular(1).one() == Modular(1).zero()


def test_mixed_rings_rejected():
	with pytest.raises(ValueError):
		Modular(5)(1) + Modular(7)(1)
	with pytest.raises(ValueError):
		Modular(5)(1) * Integer(1)
	assert Modular(5)(1) != Modular(7)(1)
	assert Modular(5)(1) != 1


def test_construction_from_other_rings_rejected():
	with pytest.raises(ValueError):
		Modular(5)(Modular(3)(2))
	with pytest.raises(ValueError):
		Integer(Modular(3)(2))
	with pytest.raises(ValueError):
		Modular(3)(Integer(7))
	assert Modular(5)(Modular(5)(7)) == Modular(5)(2)
	assert Modular(5)(int(Modular(3)(2))) == Modular(5)(2)


def test_invalid_modulus():
	with pytest.raises(ValueError):
		Modular(0)
	with pytest.raises(ValueError):
		Modular(-3)
	with pytest.raises(TypeError):
		Modular(2.5)


def test_inexact_values_rejected():
	with pytest.raises(TypeError):
		Integer(1.5)
	with pytest.raises(TypeError):
		Modular(5)(2.0)
	with pytest.raises(TypeError):
		Modular(5)(1) + 0.5


def test_inverse():
	F = Modular(7)
	for x in F.domain():
		if x:
			assert x * x.inverse() == F.one()
			assert x ** -2 == (x * x).inverse()

	with pytest.raises(ZeroDivisionError):
		F(0).inverse()

	R = Modular(12)
	assert R(5).inverse() == R(5)
	with pytest.raises(ArithmeticError):
		R(4).inverse()

	assert Integer(-1).inverse() == Integer(-1)
	with pytest.raises(ArithmeticError):
		Integer(2) ** -1


def test_domain_and_random():
	assert [int(_x) for _x in Modular(4).domain()] == [0, 1, 2, 3]
	with pytest.raises(ValueError):
		list(Integer.domain())
	with pytest.raises(ValueError):
		Integer.random(randrange)
	for n in range(100):
		assert -10 < int(Integer.random(randrange, 10)) < 10


def test_pickle_and_hash():
	for x in (Integer(-12), Modular(9)(4)):
		y = pickle.loads(pickle.dumps(x))
		assert y == x
		assert y.__class__ is x.__class__
		assert hash(y) == hash(x)
	assert len({Modular(5)(1), Modular(5)(6), Modular(5)(2)}) == 2


def test_str():
	assert str(Modular(5)(3)) == "3₅"
	assert str(Integer(-4)) == "-4"
	assert repr(Modular(5)(3)) == "Modular_5(3)"


def test_random_axioms():
	for modulus in (2, 3, 8, 101, 2 ** 61 - 1):
		R = Modular(modulus)
		for n in range(20):
			ring_axioms(R.random(randrange), R.random(randrange), R.random(randrange))


def test_gcd():
	assert gcd(13, 4) == 1
	assert gcd(84, 144) == 12
	assert gcd(426426, 5184) == 6
	assert gcd(134, 426) == 2
	assert gcd(0, 71) == 71
	assert gcd(23, 0) == 23
	assert gcd(-12, 18) == 6
	assert gcd(0, 0) == 0


if __name__ == '__main__':
	rings_test_suite(verbose=True)
