"""
Offline unit tests for the bookstore API suite core

The remote API is replaced by an in-memory stub served through httpx.MockTransport.
"""
