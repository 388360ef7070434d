"""Command line interface for lustre-dev."""
