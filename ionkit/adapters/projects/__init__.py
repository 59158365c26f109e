"""Project type adapters."""
