"""Custom exceptions for mdblocks."""


class MdblocksError(Exception):
    """Base exception for mdblocks operations."""


class ParseError(MdblocksError):
    """Input at the current position does not match the attempted fragment."""


class RenderError(MdblocksError):
    """Error while rendering parsed fragments."""
