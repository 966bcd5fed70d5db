"""Send text between processes bit by bit over SIGUSR1 and SIGUSR2, with small text and printf helpers."""

__version__ = "0.1.0"

__all__ = ["chars", "lines", "strings", "printf_spec", "formatting", "protocol", "server", "client"]