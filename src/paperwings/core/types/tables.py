"""Closed set of tables the application is allowed to address."""

from enum import Enum


class TableName(str, Enum):
    """Database tables, named exactly as they exist in the schema.

    Record store operations only accept members of this enumeration, so a
    table identifier can never originate from request data.
    """

    USER = "USER"
    BOOK = "BOOK"
    CART = "CART"
    FAVORITE = "FAVORITE"
    TICKET = "TICKET"
