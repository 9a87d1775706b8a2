"""Core building blocks shared by every layer.

Contains the Result type, error codes and error dataclasses, field rule
predicates, settings and the dependency container.
"""
