"""
Module: compositor.errors

Purpose:
    Exceptions raised by a composition call. Every one of them is fatal
    to that call: no partial composite is ever returned and nothing is
    retried internally.

Key Classes:
    - CompositeError: Base class for all composition failures
    - InvalidRequestError: Photo count does not match the grid
    - InvalidGridError: Grid has zero rows or columns
    - ImageDecodeError: A source photo could not be decoded
    - EncodeError: The finished canvas could not be serialized

Used By:
    - compositor.layout.planner
    - compositor.images.provider
    - compositor.output.encoder
    - compositor.controller
"""

from __future__ import annotations


class CompositeError(Exception):
    """Error during grid composition."""
    pass


class InvalidRequestError(CompositeError, ValueError):
    """Request cannot be laid out (photo count mismatch, no room for cells)."""
    pass


class InvalidGridError(CompositeError, ValueError):
    """Grid has zero columns or zero rows."""
    pass


class ImageDecodeError(CompositeError):
    """
    Source photo at a given index is missing or unreadable.

    Attributes:
        index: Position of the photo in the request (0-based)
    """

    def __init__(self, index: int, reason: str = "") -> None:
        self.index = index
        self.reason = reason
        message = f"Could not decode photo at index {index}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class EncodeError(CompositeError):
    """Composite could not be encoded to the output format."""
    pass
