"""Hanami Admin API package: request handling for the music-education admin app.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
