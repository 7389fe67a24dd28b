"""Custom exceptions for the OS font resolution system."""

from typing import Any


class OSFontError(Exception):
    """Base exception for all osfont errors."""

    def __init__(self, message: str, details: Any | None = None):
        super().__init__(message)
        self.details = details


class ValidationError(OSFontError):
    """Exception raised for input validation errors."""


class ConfigurationError(OSFontError):
    """Exception raised for configuration errors."""


class OSDetectionError(OSFontError):
    """Exception raised when the running operating system cannot be identified."""


class InvalidArgumentError(ValidationError):
    """Exception raised for malformed resolver arguments."""


# Specific exception classes for TRY003 compliance
class InvalidOSTypeError(InvalidArgumentError):
    """Exception raised when the OS identifier is not a string."""

    def __init__(self, value: Any):
        super().__init__(
            "Input 1 must be an empty string or a string naming the OS, "
            f"got {type(value).__name__}",
            details=value,
        )


class EmptyOSVersionError(InvalidArgumentError):
    """Exception raised when a non-empty OS is given without a version."""

    def __init__(self):
        super().__init__("Input 2 must be a nonempty version vector")


class InvalidOSVersionTypeError(InvalidArgumentError):
    """Exception raised when a version component is not a real number."""

    def __init__(self, value: Any):
        super().__init__(
            "Input 2 must contain real numeric values, "
            f"got {type(value).__name__}: {value!r}",
            details=value,
        )


class InvalidOSVersionValueError(InvalidArgumentError):
    """Exception raised when a version component is not a finite non-negative integer."""

    def __init__(self, value: Any):
        super().__init__(
            f"Input 2 must contain finite non-negative integer values, got {value!r}",
            details=value,
        )


class ConfigFileNotFoundError(ConfigurationError):
    """Exception raised when configuration file is not found."""

    def __init__(self, config_path: str):
        super().__init__(f"Configuration file not found: {config_path}")


class EmptyConfigFileError(ConfigurationError):
    """Exception raised when configuration file is empty."""

    def __init__(self, config_path: str):
        super().__init__(f"Empty configuration file: {config_path}")


class InvalidYamlError(ConfigurationError):
    """Exception raised for invalid YAML content."""

    def __init__(self, config_path: str, error: str):
        super().__init__(f"Invalid YAML in {config_path}: {error}")


class ConfigLoadError(ConfigurationError):
    """Exception raised when configuration loading fails."""

    def __init__(self, error: str):
        super().__init__(f"Failed to load configuration: {error}")


class UnknownCatalogBackendError(ConfigurationError):
    """Exception raised for an unsupported font catalog backend."""

    def __init__(self, backend: str):
        super().__init__(f"Unknown font catalog backend: {backend}")


class UnsupportedPlatformError(OSDetectionError):
    """Exception raised when the platform has no known OS tag."""

    def __init__(self, system: str):
        super().__init__(f"Unsupported platform: {system or 'unknown'}")


class OSVersionUnavailableError(OSDetectionError):
    """Exception raised when the OS version string cannot be read or parsed."""

    def __init__(self, os_name: str, raw_version: str):
        super().__init__(f"Could not determine version of {os_name}: {raw_version!r}")
