"""auto-timestamp - keep created/modified frontmatter on markdown notes up to date."""

__version__ = "0.1.0"
