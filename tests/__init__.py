"""SUNDRIES test suite.

Folder taxonomy
- unit/          : Isolated, fast checks of a single helper module.
- e2e/frontend/  : The ``sundries`` command driven through Click's CliRunner.

General guidance
- Keep unit tests fast and deterministic; reseed the shared random source
  (``seeded_random`` fixture) when sampling.
- Property-based tests live next to the unit tests they extend and use
  @pytest.mark.property.
- Markers: unit, e2e, property (unit and e2e are applied by directory).
"""
