"""
Bookstore API Scenario Suite

Black-box scenarios for the Books and Authors resources of the live API.
"""

__version__ = "1.0.0"
