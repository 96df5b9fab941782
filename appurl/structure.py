"""
# Parse the path, query, and fragment of a URL into a &.types.Locator.

# Like the decoding functions in &.escape, parsing is not strict. Any string
# produces a &.types.Locator; malformed percent escapes are left as they
# were found in the piece that contained them.

# [ Entry Points ]
# - &parse
# - &split
# - &interpret
"""
import collections

from . import types
from .escape import decode, decode_form

scheme_chars = '-.+0123456789'

Parts = collections.namedtuple("Parts",
	('type', 'scheme', 'netloc', 'path', 'query', 'fragment')
)

def split(string):
	"""
	# Split a URL or URL reference into its top-level components based on the markers:

		# (: | :// | //), /, ?, #

	# Returns the components as a &Parts instance. Absent components are &None.
	# The path, when present, includes its leading "/".

	# [ Parameters ]
	# /string/
		# A complete URL or a reference without scheme or authority.
	"""
	type = None
	scheme = None
	netloc = None
	path = None
	query = None
	fragment = None

	s = string.lstrip()
	pos = 0
	end = len(s)

	if s[:2] == "//":
		pos = 2
		type = "relative" # scheme is defined by context.
	else:
		scheme_pos = s.find(':')
		if scheme_pos == -1 or scheme_pos > min(
			x for x in (s.find('/'), s.find('?'), s.find('#'), end) if x != -1
		):
			# No scheme before the path, query, or fragment.
			type = "none"
		else:
			if s.startswith('://', scheme_pos):
				type = "authority"
				pos = scheme_pos + 3
			else:
				type = "absolute"
				pos = scheme_pos + 1
			scheme = s[:scheme_pos]

			for x in scheme:
				if not (x in scheme_chars) and \
				not ('A' <= x <= 'Z') and not ('a' <= x <= 'z'):
					# not a valid scheme; the colon belongs to the path.
					pos = 0
					scheme = None
					type = "none"
					break

	fragment_pos = s.find('#', pos)
	if fragment_pos == -1:
		fragment_pos = end
	else:
		fragment = s[fragment_pos+1:]

	query_pos = s.find('?', pos, fragment_pos)
	if query_pos == -1:
		query_pos = fragment_pos
	else:
		query = s[query_pos+1:fragment_pos]

	if type in ("authority", "relative"):
		path_pos = s.find('/', pos, query_pos)
		if path_pos == -1:
			path_pos = query_pos
		netloc = s[pos:path_pos]
	else:
		path_pos = pos

	if path_pos != query_pos:
		path = s[path_pos:query_pos]

	return Parts(type, scheme, netloc, path, query, fragment)

def split_path(path):
	"""
	# Return the tuple of decoded segments in &path.

	# One leading and one trailing slash are ignored, so `'/one/two/'` and `'/one/two'`
	# both produce `('one', 'two')`.
	"""

	if not path:
		return ()

	if path[:1] == '/':
		path = path[1:]
	if path[-1:] == '/':
		path = path[:-1]

	if not path:
		return ()
	return tuple(map(decode, path.split('/')))

def parse_query(query):
	"""
	# Construct a dictionary of decoded keys to the list of their decoded values.

	# Empty fields, as produced by `'&&'`, are skipped. A field without an `'='`
	# is a key with an empty value. The empty key is permitted: `'=v'`.
	"""

	d = {}
	if query is None:
		return d

	for field in query.split('&'):
		if not field:
			continue

		k, _, v = field.partition('=')
		d.setdefault(decode_form(k), []).append(decode_form(v))

	return d

def parse(path, query=None, fragment=None, Locator=types.Locator):
	"""
	# Construct a &.types.Locator from the raw path, query, and fragment strings of a URL.

	# [ Parameters ]
	# /path/
		# The path string; leading and trailing slashes are optional.
	# /query/
		# The query string without the "?". &None for no query.
	# /fragment/
		# The fragment string without the "#". &None for no fragment.
	"""

	if fragment is not None:
		fragment = decode(fragment)

	return Locator(split_path(path), parse_query(query), fragment)

def structure(parts):
	"""
	# Construct a &.types.Locator from the &Parts produced by &split.
	"""
	return parse(parts.path, parts.query, parts.fragment)

def interpret(string):
	"""
	# Parse a complete URL string into a &.types.Locator. Synonym for `structure(split(x))`.

	# The scheme and authority are discarded.
	"""
	return structure(split(string))
