"""Forklift calculator suite — TCO, load capacity and gradeability engines."""

__version__ = "1.0.0"
