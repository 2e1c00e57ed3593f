"""
Web interface module for tournament standings.

Provides a FastAPI-based web server for tallying match results over HTTP.
"""
