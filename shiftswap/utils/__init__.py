"""
Utility functions module.

Time Semantics:
- All stored timestamps are UTC, ISO-8601, millisecond precision, "Z" suffix
- Request `from`/`to` values are kept exactly as the user typed them
"""
