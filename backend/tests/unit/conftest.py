"""Unit test configuration.

Unit tests never reach a real MongoDB server: MongoDB repositories are
exercised against the mock client defined in
``unit/infrastructure/conftest.py``.
"""
