#!/usr/bin/python3
#-*- coding:utf8 -*-

"Native compilation of polynomial evaluation over Z/nZ and of permutation lookup, through LLVM."


import ctypes

import llvmlite.ir
import llvmlite.binding

from utils import exact_int


__all__ = 'Compiler', 'Code', 'compile_polynomial', 'compile_permutation', 'MAX_MODULUS'


# Residues are held in 64-bit words: with moduli up to 2³², `r * x + c` of residues stays below 2⁶⁴.
MAX_MODULUS = 1 << 32

Word = llvmlite.ir.IntType(64)
Index = llvmlite.ir.IntType(32)


compiler_initialized = False


def initialize_compiler():
	"Initialize the LLVM native target."

	global compiler_initialized
	try:
		llvmlite.binding.initialize()
	except RuntimeError:
		pass # llvmlite >= 0.45 initializes the core by itself and rejects this call
	llvmlite.binding.initialize_native_target()
	llvmlite.binding.initialize_native_asmprinter()
	compiler_initialized = True


class Code:
	"Natively compiled LLVM module. Compiled functions are available in `symbol`, as ctypes functions from `int` to `int`."

	def __init__(self, module):
		if not compiler_initialized:
			initialize_compiler()

		target = llvmlite.binding.Target.from_default_triple()
		self.target_machine = target.create_target_machine()
		backing_mod = llvmlite.binding.parse_assembly("")
		self.engine = llvmlite.binding.create_mcjit_compiler(backing_mod, self.target_machine)

		ll_module = llvmlite.binding.parse_assembly(str(module))
		ll_module.triple = self.target_machine.triple
		ll_module.data_layout = str(self.target_machine.target_data)
		ll_module.verify()
		self.engine.add_module(ll_module)
		self.engine.finalize_object()

		self.symbol = {}
		for function in module.functions:
			faddr = self.engine.get_function_address(function.name)
			self.symbol[function.name] = ctypes.CFUNCTYPE(ctypes.c_uint64, ctypes.c_uint64)(faddr)

	def __enter__(self):
		self.engine.run_static_constructors()
		return self

	def __exit__(self, *arg):
		self.engine.run_static_destructors()


class Compiler:
	"Collects functions in one LLVM module. `str(compiler)` gives the LLVM assembly, `compile()` the native code."

	def __init__(self, name=''):
		self.module = llvmlite.ir.Module(name=name)

	def __function(self, name):
		function = llvmlite.ir.Function(self.module, llvmlite.ir.FunctionType(Word, [Word]), name=name)
		builder = llvmlite.ir.IRBuilder(function.append_basic_block('entry'))
		return function, builder

	def polynomial(self, name, polynomial):
		"Emit `i64 name(i64 x)` evaluating `polynomial` over Z/nZ at `x` by Horner's rule."

		modulus = polynomial.Ring.modulus
		if modulus is None:
			raise ValueError("Only polynomials over Z/nZ can be compiled; integer coefficients are unbounded.")
		if modulus > MAX_MODULUS:
			raise ValueError(f"Modulus {modulus} too large for native evaluation (must be at most {MAX_MODULUS}).")

		function, builder = self.__function(name)
		n = Word(modulus)
		x = builder.urem(function.args[0], n, name='x')
		result = Word(0)
		for c in reversed(polynomial.coefficients):
			result = builder.urem(builder.add(builder.mul(result, x), Word(int(c))), n)
		builder.ret(result)
		return function

	def permutation(self, name, permutation):
		"Emit a constant image table and `i64 name(i64 i)` looking up the image of `i`. Arguments are not range checked."

		function, builder = self.__function(name)

		if not len(permutation):
			builder.ret(Word(0))
			return function

		table_type = llvmlite.ir.ArrayType(Word, len(permutation))
		table = llvmlite.ir.GlobalVariable(self.module, table_type, name + '_images')
		table.initializer = llvmlite.ir.Constant(table_type, list(permutation.images))
		table.global_constant = True
		table.linkage = 'internal'

		pointer = builder.gep(table, [Index(0), function.args[0]], inbounds=True)
		builder.ret(builder.load(pointer))
		return function

	def __str__(self):
		return str(self.module)

	def compile(self):
		return Code(self.module)


def compile_polynomial(polynomial, name='polynomial'):
	"Compile a polynomial over Z/nZ. Returns a function `x -> int(polynomial(x))` running native code."

	compiler = Compiler(name)
	compiler.polynomial(name, polynomial)
	code = compiler.compile()
	native = code.symbol[name]
	modulus = polynomial.Ring.modulus

	def evaluate(x):
		return native(exact_int(x, "Argument") % modulus)

	evaluate.code = code
	return evaluate


def compile_permutation(permutation, name='permutation'):
	"Compile a permutation. Returns a function `i -> permutation(i)` running native code; raises `IndexError` outside the domain."

	compiler = Compiler(name)
	compiler.permutation(name, permutation)
	code = compiler.compile()
	native = code.symbol[name]
	size = len(permutation)

	def image(i):
		i = exact_int(i, "Permutation argument")
		if not 0 <= i < size:
			raise IndexError(f"{i} is outside of the domain of a permutation of size {size}.")
		return native(i)

	image.code = code
	return image


if __debug__:
	from random import randrange

	def jit_test_suite(verbose=False):
		from polynomial import ModularPolynomial
		from permutation import Permutation

		if verbose: print("running jit test suite")

		for modulus in (1, 2, 5, 97, 65537, MAX_MODULUS - 5, MAX_MODULUS):
			P = ModularPolynomial(modulus)
			p = P.random(8, randrange)
			native = compile_polynomial(p)
			for n in range(50):
				x = randrange(-10 ** 12, 10 ** 12)
				assert native(x) == int(p(x)), f"{p} at {x}: {native(x)} != {p(x)}"
			if verbose: print(" polynomial ok, modulus", modulus)

		for size in (0, 1, 2, 7, 100):
			p = Permutation.random(size, randrange)
			native = compile_permutation(p)
			assert [native(_i) for _i in range(size)] == list(p.images)
			if verbose: print(" permutation ok, size", size)

		if verbose: print("jit ok")

	__all__ = __all__ + ('jit_test_suite',)


if __debug__ and __name__ == '__main__':
	jit_test_suite(verbose=True)
