"""
Entry point for running quiz-cli as a module.

Usage:
    python -m quizcli
    python -m quizcli version
    python -m quizcli --help
"""
from .cli.main import main

if __name__ == "__main__":
    main()
