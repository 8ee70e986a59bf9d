"""PURSE test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- e2e/          : The ``purse`` command driven through Click's test runner.

General guidance
- Keep unit fast and deterministic; seed any randomness explicitly.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, property, e2e
"""
