#!/usr/bin/python3
#-*- coding:utf8 -*-

"Small helpers shared by the algebra modules."


from operator import index


__all__ = 'subscript', 'superscript', 'cached', 'exact_int'


subscripts = str.maketrans("0123456789-", "₀₁₂₃₄₅₆₇₈₉₋")

def subscript(n):
	return str(n).translate(subscripts)


superscripts = str.maketrans("0123456789-", "⁰¹²³⁴⁵⁶⁷⁸⁹⁻")

def superscript(n):
	return str(n).translate(superscripts)


def cached(old_method):
	"Memoize a method of an immutable object. Results are stored on the instance, keyed by the positional arguments."

	name = '_cached_' + old_method.__name__

	def new_method(self, *args):
		try:
			store = getattr(self, name)
		except AttributeError:
			store = {}
			setattr(self, name, store)

		try:
			return store[args]
		except KeyError:
			value = old_method(self, *args)
			store[args] = value
			return value

	new_method.__name__ = old_method.__name__
	new_method.__qualname__ = old_method.__qualname__
	new_method.__doc__ = old_method.__doc__
	return new_method


def exact_int(value, what="value"):
	"Convert `value` to `int` without loss. Accepts anything implementing `__index__`; floats and other inexact numbers raise `TypeError`."

	try:
		return index(value)
	except TypeError:
		raise TypeError(f"{what} must be an exact integer (got {type(value).__name__} `{value!r}`).") from None
