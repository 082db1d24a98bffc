"""Presentation layer: command line interface and pytest plugin."""
