"""
Exceptions raised while generating model classes.

Every error the CLI reports derives from ``GeneratorError`` so a single
handler can turn it into a short message and a failing exit code.
"""


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class InvalidNameError(GeneratorError):
    """Raised when the class name argument is empty."""

    pass


class PreexistingTargetError(GeneratorError):
    """Raised when the target file exists and overwriting was not requested."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Target already exists: {path}")


class TemplateError(GeneratorError):
    """Exception raised for stub loading errors."""

    pass


class FilesystemWriteError(GeneratorError):
    """Raised when the target directory or file cannot be written."""

    pass


class ConfigError(GeneratorError):
    """Exception raised for configuration-related errors."""

    pass
