"""Command line entry points for the mtpeek package."""
