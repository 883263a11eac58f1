"""Notionify: natural-language to Notion page template service."""

__version__ = "1.0.0"
