"""Core domain logic for the opsboot tools."""
