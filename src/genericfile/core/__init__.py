"""Generic file path core: value type, errors and descriptions."""
