"""Internal support namespace for SUNDRIES helper modules.

This package holds the small pieces every public helper module leans on:
argument guards and the shared random source. Nothing here is public API;
import specific helpers from their defining modules.

Import direction:
- May be imported by any SUNDRIES module.
- Must not import public helper modules other than `sundries.errors`.
"""
