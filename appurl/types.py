"""
# The structured application URL.
"""
import dataclasses
from dataclasses import dataclass
from types import MappingProxyType
from collections.abc import Mapping

from . import serialize

@dataclass(frozen=True)
class Locator(object):
	"""
	# A decoded path, a multi-valued query mapping, and an optional fragment.

	# Locators are values; the methods that change a field return a new instance.
	# Construction coerces &path to a tuple and the &query values to tuples,
	# drops the query keys that have no values, and makes &query read-only.

	# [ Properties ]
	# /path/
		# The decoded path segments in order. Empty for the root.
	# /query/
		# Dictionary of decoded keys to the tuple of their decoded values
		# in the order they were given. Read-only; keys given without values
		# are not retained.
	# /fragment/
		# The decoded fragment. &None when no fragment is present; an empty
		# string is a present, but empty, fragment.
	"""

	path: (tuple) = ()
	query: (Mapping) = dataclasses.field(default_factory=dict)
	fragment: (str) = None

	def __post_init__(self):
		object.__setattr__(self, 'path', tuple(self.path))
		q = ((k, tuple(v)) for k, v in self.query.items())
		object.__setattr__(self, 'query', MappingProxyType({k: v for k, v in q if v}))

	def __hash__(self):
		return hash((self.path, tuple(sorted(self.query.items())), self.fragment))

	def __str__(self):
		return serialize.serialize(self)

	def replace(self, **fields):
		return dataclasses.replace(self, **fields)

	def extend(self, *segments):
		"""
		# Construct a new &Locator with &segments appended to the path.
		"""
		return self.replace(path=self.path + segments)

	def append(self, key, value):
		"""
		# Construct a new &Locator with &value added to the end of &key's values.
		"""
		q = dict(self.query)
		q[key] = q.get(key, ()) + (value,)
		return self.replace(query=q)

	def discard(self, key):
		"""
		# Construct a new &Locator without the &key parameter.
		"""
		if key not in self.query:
			return self

		q = dict(self.query)
		del q[key]
		return self.replace(query=q)

	def first(self, key, default=None):
		"""
		# Get the first value of the &key parameter or &default if it has none.
		"""
		values = self.query.get(key)
		if not values:
			return default
		return values[0]
