"""Command line interface for rackmap."""
