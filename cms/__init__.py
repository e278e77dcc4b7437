"""
CMS data-access layer.

Typed page/module records, their CRUD and join operations, and the
bounded connection pool they run on.
"""

__version__ = "0.1.0"
