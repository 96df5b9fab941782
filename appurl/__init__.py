"""
# appurl converts the path, query, and fragment strings of a URL into a structured
# application URL and back. It does not perform any communication or resolution;
# it merely structures the text of a URL and serializes structures into text.

# [ Application URLs ]

# &.types.Locator holds the decoded path segments, a dictionary of query keys to
# their values, and an optional fragment. Locators are created by &.structure.parse
# from the strings provided by a URL parser, or by &.structure.interpret from
# a complete URL string.

# &.serialize.serialize writes a Locator back into a string with minimal percent
# encoding as defined by &.escape.
"""
