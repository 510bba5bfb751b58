"""C-style memory helpers, string utilities and a printf-style formatter."""

__version__ = "0.1.0"

__all__ = ["memory", "text", "spec", "sprintf"]