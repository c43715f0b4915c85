"""Custom Exceptions for the agendasub application."""

class AgendaSubError(Exception):
    """Base class for exceptions in this module."""
    pass

class ConfigurationError(AgendaSubError):
    """Exception raised for errors in configuration loading or validation."""
    pass

class NoEntriesError(AgendaSubError):
    """Exception raised when a transcript yields no valid subtitle entries."""
    pass

class FormattingError(AgendaSubError):
    """Exception raised for errors while writing parse results."""
    pass

class FileSystemError(AgendaSubError):
    """Exception raised for file system related errors (permissions, not found etc)."""
    pass
