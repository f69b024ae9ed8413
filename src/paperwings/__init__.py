"""PaperWings bookstore backend.

HTTP API over a MySQL catalog of users, books, carts, favorites and purchase
tickets.
"""

__version__ = "0.1.0"
