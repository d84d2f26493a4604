"""Test suite for uniform_http.

Test structure follows the test pyramid:
- unit/: Unit tests - each layer in isolation (fake transports, mocks)
- integration/: Facade over the real httpx transport with pytest-httpx
"""
