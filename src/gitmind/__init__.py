"""
GitMind: AI-powered git workflow assistant

Setup wizard, configuration model and git/GitHub adapters.
"""

try:
    from importlib.metadata import version
    __version__ = version("gitmind")
except Exception:
    __version__ = "0.0.0"  # Fallback for development

__all__ = ["__version__"]
