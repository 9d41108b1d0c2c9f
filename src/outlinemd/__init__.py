"""outlinemd - push Markdown documents to Outline and pull them back."""

__version__ = "0.1.0"
