"""Kepegawaian - CRUD API for employee master data."""

__version__ = "0.1.0"
