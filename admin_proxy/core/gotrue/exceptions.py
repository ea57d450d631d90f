"""GoTrue-specific exceptions for error handling."""


class GoTrueError(Exception):
    """Base exception for all identity provider operations."""
    pass


class GoTrueAPIError(GoTrueError):
    """Error returned by the GoTrue admin API (or raised reaching it).
    
    Attributes:
        status_code: HTTP status code (503 when the provider was unreachable)
        message: Error message extracted from the provider response
        endpoint: API endpoint that failed
    """
    
    def __init__(self, status_code: int, message: str, endpoint: str):
        self.status_code = status_code
        self.message = message
        self.endpoint = endpoint
        super().__init__(f"[{status_code}] {endpoint}: {message}")


class UserNotFoundError(GoTrueError):
    """Email lookup failed - no user carries that address."""
    pass
