"""SUNDRIES

Small, dependency-light helpers over built-in Python values: strings,
sequences, numbers, enums, URIs, XML, awaitables and packaged resources.
The URI helpers rewrite query and route parameters in place without
disturbing the rest of the URI.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
