"""Command-line interface for treewalk."""
