"""Command line interface for the expenses registry."""
