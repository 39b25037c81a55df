"""Command-line shell: argument parsing and sheet lookup."""
