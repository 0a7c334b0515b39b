"""
Language-specific dialects.

Each subpackage provides a Dialect subclass for one target language.
"""
