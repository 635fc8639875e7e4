"""Drive Ghostty into declarative multi-pane layouts."""

__version__ = "0.3.0"
