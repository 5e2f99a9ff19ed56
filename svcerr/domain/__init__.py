"""
Domain layer package.

Contains the error model: classification taxonomy, error values and
the builders that assemble them. No framework imports, no IO.
"""
