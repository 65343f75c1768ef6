"""Core domain types: enums, errors, missions state, rule books and config."""
