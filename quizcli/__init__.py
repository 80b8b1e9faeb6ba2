"""
quiz-cli: console quiz authoring and administration.

Build a quiz from multiple choice, true/false and short answer questions,
review it with the answer key, and take it for an immediate score.
"""

__version__ = "1.0.0"
