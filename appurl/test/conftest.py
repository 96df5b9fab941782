"""
# Contention fixture for the tests of the project.

# Test functions take a `test` parameter and write their assertions as
# contentions:

#!syntax/python
	def test_feature(test):
		test/module.functionality() == expectation
		test/ValueError ^ (lambda: module.functionality(invalid))
"""
import operator
import functools

import pytest

class Absurdity(AssertionError):
	"""
	# Exception raised by &Contention instances designating a failed assertion.
	"""

	# for re-constituting the expression
	operator_names_mapping = {
		'__eq__': '==',
		'__ne__': '!=',
	}

	def __init__(self, operator, former, latter):
		self.operator = operator
		self.former = former
		self.latter = latter
		super().__init__(str(self))

	def __str__(self):
		opchars = self.operator_names_mapping.get(self.operator, self.operator)
		return ' '.join((repr(self.former), opchars, repr(self.latter)))

class Contention(object):
	"""
	# Assertion built by the true division operator of &Test.
	"""

	__slots__ = ('_operand', '_storage')

	def __init__(self, object):
		self._operand = object

	def _check(self, operand, opname, operator):
		if not operator(self._operand, operand):
			raise Absurdity(opname, self._operand, operand)
		return True

	def __eq__(self, operand):
		return self._check(operand, '__eq__', operator.eq)

	def __ne__(self, operand):
		return self._check(operand, '__ne__', operator.ne)

	__hash__ = None

	def __enter__(self, partial=functools.partial):
		return partial(getattr, self, '_storage', None)

	def __exit__(self, typ, val, tb):
		x = self._operand
		y = self._storage = val

		if not isinstance(y, x):
			raise Absurdity("isinstance", x, y)
		return True # Trap the exception if it is expected.

	def __xor__(self, operand):
		"""
		# Contend that the &operand raises the given exception when it is called.
		"""

		with self as exc:
			operand()
		return exc()

class Test(object):
	"""
	# The object given to test functions for constructing &Contention instances.
	"""

	__slots__ = ()

	def __truediv__(self, operand):
		return Contention(operand)

	def isinstance(self, *args):
		if not isinstance(*args):
			raise Absurdity("isinstance", *args)

@pytest.fixture
def test():
	return Test()
