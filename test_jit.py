#!/usr/bin/python3
#-*- coding:utf8 -*-


from random import randrange

import pytest

from polynomial import IntegerPolynomial, ModularPolynomial
from permutation import Permutation
from jit import Compiler, compile_polynomial, compile_permutation, MAX_MODULUS, jit_test_suite


def test_suite():
	jit_test_suite()


def test_polynomial():
	P = ModularPolynomial(7)
	p = P([1, 1, 1])
	native = compile_polynomial(p)
	for x in range(-20, 20):
		assert native(x) == int(p(x))
	assert native(3) == 13 % 7


def test_zero_polynomial():
	native = compile_polynomial(ModularPolynomial(5).zero())
	assert native(3) == 0


def test_polynomial_limits():
	with pytest.raises(ValueError):
		compile_polynomial(IntegerPolynomial([1, 2]))
	with pytest.raises(ValueError):
		compile_polynomial(ModularPolynomial(MAX_MODULUS + 1)([1, 2]))


def test_permutation():
	p = Permutation([2, 0, 1, 4, 3])
	native = compile_permutation(p)
	assert [native(_i) for _i in range(5)] == [2, 0, 1, 4, 3]
	with pytest.raises(IndexError):
		native(5)
	with pytest.raises(IndexError):
		native(-1)

	empty = compile_permutation(Permutation([]))
	with pytest.raises(IndexError):
		empty(0)


def test_compiler_module():
	compiler = Compiler('algebra')
	compiler.polynomial('square_plus_one', ModularPolynomial(11)([1, 0, 1]))
	compiler.permutation('rotate', Permutation([1, 2, 0]))
	assembly = str(compiler)
	assert 'square_plus_one' in assembly
	assert 'rotate_images' in assembly
	assert 'urem' in assembly

	with compiler.compile() as code:
		assert code.symbol['square_plus_one'](3) == 10
		assert code.symbol['square_plus_one'](4) == 17 % 11
		assert code.symbol['rotate'](2) == 0


def test_large_modulus():
	P = ModularPolynomial(MAX_MODULUS - 1)
	p = P([MAX_MODULUS - 2] * 6)
	native = compile_polynomial(p)
	for n in range(20):
		x = randrange(MAX_MODULUS)
		assert native(x) == int(p(x))


def test_largest_modulus():
	P = ModularPolynomial(MAX_MODULUS)
	p = P([MAX_MODULUS - 1] * 4)
	native = compile_polynomial(p)
	for x in (0, 1, MAX_MODULUS - 1, MAX_MODULUS, randrange(MAX_MODULUS)):
		assert native(x) == int(p(x))


if __name__ == '__main__':
	jit_test_suite(verbose=True)
