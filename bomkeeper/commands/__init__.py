"""CLI subcommands for bomkeeper."""
