"""
Interface layer package.

Translates domain errors into HTTP responses.
"""
