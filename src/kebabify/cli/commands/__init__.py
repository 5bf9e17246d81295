"""Command implementations for the kebabify CLI."""
