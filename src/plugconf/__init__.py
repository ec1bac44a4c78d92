"""
plugconf - extension directive resolution and layered properties loading.

Resolves the effective, ordered list of active extensions from a default
ordering plus a user directive, and loads ``.properties`` configuration from
a file path or from every matching resource on a search path.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
