"""Stockroom exceptions"""


class StockroomError(Exception):
    """Base class for all stockroom errors"""


class ConfigurationError(StockroomError):
    """Raised when a category has no update strategy registered"""

    def __init__(self, category, known=()):
        self.category = category
        self.known = tuple(known)
        message = f"No update strategy for category {category!r}"
        if self.known:
            message += f" (known categories: {', '.join(self.known)})"
        super().__init__(message)
