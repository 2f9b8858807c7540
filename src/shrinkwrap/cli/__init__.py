"""Command line interface for shrinkwrap."""
