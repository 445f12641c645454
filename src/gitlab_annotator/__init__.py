"""Publishes grading findings as review comments on GitLab merge requests and commits."""

__version__ = "0.1.0"
