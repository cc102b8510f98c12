"""Entrypoints (inbound adapters) for SUNDRIES.

Expose the helper library to the outside world. Today that is the ``sundries``
command line. Parse and validate inputs, call the helper modules, and present
results.
"""
