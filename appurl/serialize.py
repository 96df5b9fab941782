"""
# Serialize and tokenize application URLs.

# The serialized form is the path, followed by the query and fragment when
# present. Query keys are written in sorted order, and the values of a key
# are written in the order they are held.

# [ Entry Points ]
# - &serialize
# - &serialize_path
# - &tokens
"""
from .escape import PartKind, translations

def serialize_path(path) -> str:
	"""
	# Join the path segments on "/" *after* escaping them. Always starts with a "/".
	"""
	t = translations[PartKind.path_segment]
	return '/' + '/'.join([x.translate(t) for x in path])

def query_entries(query):
	"""
	# Produce the (key, value) pairs of &query in serialization order.

	# Keys are sorted; keys without values produce nothing.
	"""
	for k in sorted(query):
		for v in query[k]:
			yield (k, v)

def serialize_query(query,
		key_trans = translations[PartKind.query_key],
		value_trans = translations[PartKind.query_value],
	):
	"""
	# Construct the query string, including the leading "?", from &query.

	# [ Returns ]
	# &None if no key has any values.
	"""

	entries = []
	for k, v in query_entries(query):
		if k and not v:
			# Re-parses as the empty value.
			entries.append(k.translate(key_trans))
		else:
			entries.append(k.translate(key_trans) + '=' + v.translate(value_trans))

	if not entries:
		return None
	return '?' + '&'.join(entries)

def serialize_fragment(fragment):
	if fragment is None:
		return None
	return '#' + fragment.translate(translations[PartKind.fragment])

def serialize(locator) -> str:
	"""
	# Construct the string form of an &.types.Locator.
	"""

	s = serialize_path(locator.path)

	q = serialize_query(locator.query)
	if q is not None:
		s += q

	f = serialize_fragment(locator.fragment)
	if f is not None:
		s += f

	return s

def path_tokens(path, translation=translations[PartKind.path_segment]):
	if not path:
		yield ('delimiter-path', "/")
		return

	for segment in path:
		yield ('delimiter-path', "/")
		yield ('path-segment', segment.translate(translation))

def query_tokens(query,
		key_trans = translations[PartKind.query_key],
		value_trans = translations[PartKind.query_value],
	):
	delimiter = "?"
	for k, v in query_entries(query):
		yield ('delimiter', delimiter)
		delimiter = "&"

		yield ('query-key', k.translate(key_trans))
		if not k or v:
			yield ('delimiter', "=")
			yield ('query-value', v.translate(value_trans))

def fragment_tokens(fragment, translation=translations[PartKind.fragment]):
	if fragment is None:
		return
	yield ('delimiter', "#")
	yield ('fragment', fragment.translate(translation))

def tokens(locator):
	"""
	# Construct an iterator producing the tokens of the serialized &locator.
	# The items are pairs providing the type and the exact text; joining
	# the texts produces the same string as &serialize.
	"""
	yield from path_tokens(locator.path)
	yield from query_tokens(locator.query)
	yield from fragment_tokens(locator.fragment)
