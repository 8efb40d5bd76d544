"""gitscope: scoped git command execution and repository probes."""

__version__ = "0.1.0"
