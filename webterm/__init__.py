#!/usr/bin/env python3
"""
Web Terminal Module for Shell Commander
Browser page and socket channel driving one shell session per client
"""

from .app import app, socketio

__all__ = [
    'app',
    'socketio'
]
