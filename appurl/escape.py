"""
# Percent escape encoding and decoding for the parts of an application URL.

# Encoding is minimal: only the characters that would be structurally ambiguous
# inside a given &PartKind are escaped. Everything else, including non-ASCII
# text, is written literally.

# Decoding is total. &unescape returns &None when the string carries a malformed
# escape rather than raising, and &decode falls back to the original text.

# [ Elements ]
# /translations/
	# Mapping of &PartKind to the &str.maketrans table used by &encode.
"""
import re
import enum

controls = ''.join(map(chr, list(range(0, 0x20)) + list(range(0x7F, 0xA0))))
space = ' '

class PartKind(enum.Enum):
	"""
	# The syntactic role of a string inside an application URL.

	# [ Elements ]
	# /path_segment/
		# A single segment of the path; the text between two slashes.
	# /query_key/
		# The key of a query parameter; the text before the first `=`.
	# /query_value/
		# The value of a query parameter.
	# /fragment/
		# The text following the `#`.
	"""

	path_segment = 'path-segment'
	query_key = 'query-key'
	query_value = 'query-value'
	fragment = 'fragment'

reserved = {
	PartKind.path_segment: "%/?#",
	PartKind.query_key: "%&=+#",
	PartKind.query_value: "%&=+#",
	PartKind.fragment: "%#",
}

pct_encode = '%%%0.2X'.__mod__

def escape_character(character, *, encode=pct_encode):
	"""
	# Percent encode each UTF-8 byte of &character.
	"""
	return ''.join(map(encode, character.encode('utf-8')))

def _mktrans(chars):
	return str.maketrans({
		ord(x): escape_character(x)
		for x in chars + space + controls
	})

translations = {
	kind: _mktrans(chars)
	for kind, chars in reserved.items()
}

def encode_character(kind:PartKind, character:str) -> str:
	"""
	# Return &character unchanged or its percent escaped form when it is
	# not safe inside a part of the given &kind.

	# [ Exceptions ]
	# /&ValueError/
		# &character is not a string of exactly one character. Use &encode
		# for strings.
	"""
	if len(character) != 1:
		raise ValueError("encode_character requires exactly one character")
	return character.translate(translations[kind])

def encode(kind:PartKind, string:str) -> str:
	"""
	# Percent encode the characters of &string that are not safe inside a part
	# of the given &kind.
	"""
	return string.translate(translations[kind])

percent_escapes_re = re.compile('(?:%[0-9a-fA-F]{2})+')
stray_percent_re = re.compile('%(?![0-9a-fA-F]{2})')

# Bytes that did not form valid UTF-8 under surrogateescape.
undecodable_re = re.compile('[\udc80-\udcff]')

def _decode_escapes(escapes):
	octets = bytes.fromhex(escapes.replace('%', ''))
	return octets.decode('utf-8', 'surrogateescape')

def unescape(string:str):
	"""
	# Substitute percent escapes with the characters their UTF-8 bytes encode.

	# [ Returns ]
	# The decoded string or &None if &string contains a `%` that is not followed
	# by two hexadecimal digits or a run of escapes that is not valid UTF-8.
	"""

	if '%' not in string:
		return string
	if stray_percent_re.search(string) is not None:
		return None

	parts = []
	pos = 0
	for m in percent_escapes_re.finditer(string):
		text = _decode_escapes(m.group(0))
		if undecodable_re.search(text) is not None:
			return None

		parts.append(string[pos:m.start()])
		parts.append(text)
		pos = m.end()
	parts.append(string[pos:])

	return ''.join(parts)

def decode(string:str) -> str:
	"""
	# Percent decode &string, or return it unchanged if it holds malformed escapes.
	"""
	r = unescape(string)
	if r is None:
		return string
	return r

def decode_form(string:str) -> str:
	"""
	# Decode a query key or value using the form convention: `+` is a space.

	# The original &string is returned if the escapes are malformed.
	"""
	r = unescape(string.replace('+', ' '))
	if r is None:
		return string
	return r
