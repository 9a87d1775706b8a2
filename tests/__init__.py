"""Test suite for usergate.

- unit/: Unit tests - validators, event bus, dispatcher, container, adapters
"""
