"""
Constants for symbolic type resolution.

Names here are part of the type encoding shared with the indexer, so
changing one changes what resolved sets mean.
"""

# Reserved type names
TYPE_NAMES = {
    "array_suffix": "[]",        # Foo[] is "array of Foo"
    "static": "static",          # Late static binding placeholder
    "mixed": "mixed",            # Indexable, element type unknown
    "array": "array",            # Generic array
    "empty_array": "empty_array",  # Array literal with no known element type
}

# Member lookup settings
LOOKUP_CONFIG = {
    "magic_getter": "__get",     # Consulted when an instance property is undeclared
    "namespace_separator": "\\",
}
