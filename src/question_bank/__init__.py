"""Question bank administration API."""
