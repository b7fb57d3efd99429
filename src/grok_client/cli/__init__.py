"""Command-line interface for the Grok client."""
