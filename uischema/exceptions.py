"""
This module implements custom exceptions
"""

## Base Error ##################################################################


class UISchemaError(Exception):
    """Base class for all uischema exceptions"""

    def __init__(self, message: str, is_fatal_error: bool):
        """Construct with a flag indicating whether this is a fatal error. This
        will be a static property of all children.
        """
        super().__init__(message)
        self._is_fatal_error = is_fatal_error

    @property
    def is_fatal_error(self):
        """Property indicating whether or not this error means the library
        itself is unusable, as opposed to a single bad input document
        """
        return self._is_fatal_error


## Fatal Errors ################################################################


class UISchemaFatalError(UISchemaError):
    """A UISchemaFatalError indicates that the library cannot operate, for
    example because its own configuration is invalid.
    """

    def __init__(self, message: str = ""):
        super().__init__(message=message, is_fatal_error=True)


class ConfigError(UISchemaFatalError):
    """Exception caused by invalid library configuration"""


## Expected Errors #############################################################


class UISchemaExpectedError(UISchemaError):
    """A UISchemaExpectedError indicates a problem with a single input document
    that the caller is expected to report back to whoever supplied it.
    """

    def __init__(self, message: str = ""):
        super().__init__(message=message, is_fatal_error=False)


class SchemaParseError(UISchemaExpectedError):
    """Exception raised when a raw schema or override document cannot be parsed
    into the library's types
    """


class OverrideValidationError(UISchemaExpectedError):
    """Exception raised when an operator-authored override document fails
    validation before being stored
    """


class DefinitionTypeError(UISchemaExpectedError):
    """Exception raised when a definition type is not one that carries a
    parameter schema
    """


## Assertions ##################################################################


def assert_schema(condition: bool, message: str = ""):
    """Replacement for assert() which will throw a SchemaParseError. This
    should be used when decoding a raw document.
    """
    if not condition:
        raise SchemaParseError(message)


def assert_override(condition: bool, message: str = ""):
    """Replacement for assert() which will throw an OverrideValidationError.
    This should be used when validating an override document.
    """
    if not condition:
        raise OverrideValidationError(message)


def assert_config(condition: bool, message: str = ""):
    """Replacement for assert() which will throw a ConfigError. This should be
    used when checking the library configuration.
    """
    if not condition:
        raise ConfigError(message)
