"""Command-line interface for buildver."""
