"""
Bookstore API Testing Suite

Black-box contract testing of the Online Bookstore REST API
(Books and Authors) over HTTP.
"""

__version__ = "1.0.0"
