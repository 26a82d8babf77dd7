"""Operational scripts for the Question Bank service."""
