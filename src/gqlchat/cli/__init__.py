"""Command line entry point for gqlchat (see gqlchat.cli.app)."""
