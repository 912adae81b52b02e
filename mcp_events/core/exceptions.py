"""Exception hierarchy for the MCP event package."""


class McpEventsError(Exception):
    """Base exception for package-level issues."""


class ConfigurationError(McpEventsError):
    """Raised when settings cannot be applied."""


class UnsupportedEventError(McpEventsError, TypeError):
    """Raised when a listener receives something that is not a tool execution event."""
