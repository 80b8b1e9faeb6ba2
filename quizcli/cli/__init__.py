"""
Command line interface: typer app and the interactive menu.
"""
