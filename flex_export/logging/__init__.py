"""Labeled stdout logging for the flex rate export tool."""
