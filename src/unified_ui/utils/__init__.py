"""Logging and settings support for unified-ui."""
