"""Command-line interface for semnorm."""
