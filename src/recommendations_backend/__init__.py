"""REST service for submitting, listing and voting on video recommendations."""

__version__ = "0.1.0"
