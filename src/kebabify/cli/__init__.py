"""Command line interface for kebabify."""
