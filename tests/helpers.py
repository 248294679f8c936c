"""Shared constants and small helpers for the test suite."""

MISSING_DEFAULT_LICENSE_FILEPATH = '/nonexistent/enterprise-tests/redpanda.license'


def replace_char(text: str, index: int) -> str:
    """Swap one base64 character for a different one from the same alphabet."""
    current = text[index]
    replacement = 'A' if current != 'A' else 'B'
    return text[:index] + replacement + text[index + 1:]
