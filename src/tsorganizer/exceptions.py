# Custom exceptions for tsorganizer

class OrganizerError(Exception):
    """Base exception for all application-specific errors."""
    pass

class ParseError(OrganizerError):
    """Raised when a file cannot be parsed by tree-sitter without errors."""
    def __init__(self, file_path: str, line: int, column: int, message: str = "syntax error"):
        self.file_path = file_path
        self.line = line
        self.column = column
        self.message = message
        super().__init__(f"Failed to parse {file_path}: {message} at line {line}, column {column}")

class ConfigurationError(OrganizerError):
    """Raised for structurally invalid configuration values."""
    def __init__(self, message: str, source: str = None):
        self.source = source
        self.message = message
        if source:
            message = f"{source}: {message}"
        super().__init__(message)
