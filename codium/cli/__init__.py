"""Typer CLI for the lesson viewer."""
