"""Restricted Markdown to Atlassian Document Format (ADF) converter."""

__version__ = "0.1.0"
