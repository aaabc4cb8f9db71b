"""
Lookup Tables Custom Exceptions

Provides specific exception classes for the errors that can occur while
building, configuring, reading and plotting lookup tables.
"""

class LookupTablesError(Exception):
    """Base exception class for all Lookup Tables errors"""

    def __init__(self, message: str, error_code: str = "LT_GENERAL"):
        super().__init__(message)
        self.error_code = error_code
        self.message = message

    def __str__(self):
        return f"[{self.error_code}] {self.message}"

class ConstructionError(LookupTablesError):
    """Raised when a table cannot be built from the given arguments"""

    def __init__(self, message: str, num_arguments: int = None):
        self.num_arguments = num_arguments

        full_message = f"Table construction failed: {message}"

        if num_arguments is not None:
            full_message += f" (arguments: {num_arguments})"

        super().__init__(full_message, "LT_CONSTRUCTION")

class InsufficientDataError(LookupTablesError):
    """Raised when a table has fewer points than its style requires"""

    def __init__(self, message: str, style: str = None,
                 required_points: int = None, available_points: int = None):
        self.style = style
        self.required_points = required_points
        self.available_points = available_points

        full_message = f"Insufficient data: {message}"

        details = []
        if style is not None:
            details.append(f"style={style}")
        if required_points is not None:
            details.append(f"required={required_points}")
        if available_points is not None:
            details.append(f"available={available_points}")

        if details:
            full_message += f" ({', '.join(details)})"

        super().__init__(full_message, "LT_INSUFFICIENT_DATA")

class ArityError(LookupTablesError):
    """Raised when the number of lookup coordinates does not match the table depth"""

    def __init__(self, message: str, num_coordinates: int = None):
        self.num_coordinates = num_coordinates

        full_message = f"Arity mismatch: {message}"

        if num_coordinates is not None:
            full_message += f" (coordinates: {num_coordinates})"

        super().__init__(full_message, "LT_ARITY")

class UnknownStyleError(LookupTablesError):
    """Raised when a table is asked to use an unrecognised interpolation style"""

    def __init__(self, message: str, style=None):
        self.style = style

        full_message = f"Unknown interpolation style: {message}"

        if style is not None:
            full_message += f" (style: {style!r})"

        super().__init__(full_message, "LT_STYLE")

class ConfigurationError(LookupTablesError):
    """Raised when configuration is invalid"""

    def __init__(self, message: str, config_key: str = None,
                 config_value: str = None):
        self.config_key = config_key
        self.config_value = config_value

        full_message = f"Configuration error: {message}"

        if config_key:
            full_message += f" (key: {config_key}"
            if config_value:
                full_message += f", value: {config_value}"
            full_message += ")"

        super().__init__(full_message, "LT_CONFIG")

class VisualizationError(LookupTablesError):
    """Raised when visualization operations fail"""

    def __init__(self, message: str, plot_type: str = None):
        self.plot_type = plot_type

        if plot_type:
            full_message = f"Visualization failed ({plot_type}): {message}"
        else:
            full_message = f"Visualization failed: {message}"

        super().__init__(full_message, "LT_VISUALIZATION")

# Export commonly used exceptions for easy import
__all__ = [
    'LookupTablesError',
    'ConstructionError',
    'InsufficientDataError',
    'ArityError',
    'UnknownStyleError',
    'ConfigurationError',
    'VisualizationError',
]
