"""repo-discovery: resolve the repositories a run should operate on."""

__version__ = "0.1.0"
