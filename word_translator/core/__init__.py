"""
Core modules for the word translator.

This package contains prompt construction, selection translation,
usage accounting and the chat session.
"""
