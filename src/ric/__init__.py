"""Review a GitHub repository or pull request in your editor."""

__version__ = "0.1.0"
