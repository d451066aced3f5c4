"""Forward a client payload to a GitHub repository as a repository_dispatch event."""

__version__ = "0.1.0"
