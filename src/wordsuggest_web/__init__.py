"""Flask JSON API and a tiny HTML page on top of wordsuggest.SuggestionEngine."""
from .web import app, main

__all__ = ["app", "main"]
