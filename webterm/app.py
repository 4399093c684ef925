#!/usr/bin/env python3
"""
Flask Web Terminal - Serves the terminal page and relays lines over Socket.IO
"""

import os
import logging
from typing import Dict

from flask import Flask, render_template, request
from flask_socketio import SocketIO, emit

from shellcommander.shell import ShellSession, INITIAL_PROMPT
from shellcommander.terminal import BufferedTerminal

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Flask app setup
app = Flask(__name__)
app.config['SECRET_KEY'] = os.getenv('FLASK_SECRET_KEY', 'shellcommander-secret-key')
socketio = SocketIO(app)

# Shell sessions keyed by Socket.IO session id
sessions: Dict[str, ShellSession] = {}


@app.route('/')
def index():
    """Terminal page"""
    return render_template('index.html', prompt=INITIAL_PROMPT)


@app.errorhandler(404)
def not_found(error):
    return 'Not Found', 404


# WebSocket events
@socketio.on('connect')
def handle_connect():
    """Start a shell session for the new client"""
    terminal = BufferedTerminal(prompt=INITIAL_PROMPT)
    sessions[request.sid] = ShellSession(terminal)
    logger.info(f"Terminal client {request.sid} connected")
    emit('prompt', {'prompt': terminal.prompt})


@socketio.on('disconnect')
def handle_disconnect():
    """Drop the client's shell session"""
    sessions.pop(request.sid, None)
    logger.info(f"Terminal client {request.sid} disconnected")


@socketio.on('command')
def handle_command(data):
    """Run one input line and send back its output and prompt"""
    session = sessions.get(request.sid)
    if session is None:
        logger.warning(f"Command from unknown client {request.sid}")
        return

    line = data.get('line', '') if isinstance(data, dict) else ''
    terminal = session.terminal
    previous_prompt = terminal.prompt

    session.submit(line)

    for output in terminal.drain():
        emit('output', {'line': output})
    if terminal.prompt != previous_prompt:
        emit('prompt', {'prompt': terminal.prompt})


def main():
    """Run the web terminal"""
    logging.basicConfig(
        level=os.getenv('SHELLCOMMANDER_LOG_LEVEL', 'INFO').upper(),
        format=LOG_FORMAT
    )

    host = os.getenv('SHELLCOMMANDER_WEB_HOST', '0.0.0.0')
    port = int(os.getenv('SHELLCOMMANDER_WEB_PORT', '3000'))
    logger.info(f"Web terminal listening on {host}:{port}")

    debug = os.getenv('FLASK_DEBUG', 'false').lower() == 'true'
    socketio.run(
        app,
        host=host,
        port=port,
        debug=debug,
        allow_unsafe_werkzeug=debug
    )


if __name__ == '__main__':
    main()
