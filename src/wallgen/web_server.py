#!/usr/bin/env python3
"""
Web server for Wallgen.
Exposes the wallpaper pipeline as a JSON API returning {images, text} envelopes.
"""

import asyncio
import logging

from flask import Flask, request, jsonify
from flask_cors import CORS
from pydantic import ValidationError

from wallgen.config import settings
from wallgen.core import generate_wallpaper
from wallgen.errors import ConfigurationError, GenerationError
from wallgen.models import GenerationRequest

logger = logging.getLogger(__name__)

app = Flask(__name__)
CORS(app)  # Enable CORS for all routes

app.config['MAX_CONTENT_LENGTH'] = 16 * 1024 * 1024  # 16MB max reference image


@app.route('/api/styles')
def get_styles():
    """List the style catalog used in styles mode"""
    return jsonify({
        'success': True,
        'styles': list(settings.styles)
    })


@app.route('/api/generate', methods=['POST'])
def generate():
    """Generate wallpaper URLs for a subject"""
    data = request.get_json(silent=True)

    subject = None
    if isinstance(data, dict):
        subject = data.get('prompt', data.get('subject'))
    if subject is None:
        return jsonify({
            'success': False,
            'error': 'Prompt is required'
        }), 400

    try:
        generation_request = GenerationRequest(
            subject=subject,
            reference_image=data.get('input_image'),
            aspect_ratio=data.get('aspect_ratio', '9:16'),
            mode=data.get('mode', 'creative'),
            count=data.get('count', 1),
        )
    except ValidationError as e:
        return jsonify({
            'success': False,
            'error': 'Invalid request',
            'details': [err['msg'] for err in e.errors()]
        }), 400

    try:
        result = asyncio.run(generate_wallpaper(generation_request))
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return jsonify({
            'success': False,
            'error': str(e),
            'type': type(e).__name__
        }), 500
    except GenerationError:
        return jsonify({
            'success': False,
            'error': "Sorry, I encountered an error. Please try again.",
            'type': 'GenerationError'
        }), 502

    response_data = {'success': True}
    response_data.update(result.envelope())
    return jsonify(response_data)


@app.errorhandler(404)
def not_found(error):
    return jsonify({
        'success': False,
        'error': 'Endpoint not found'
    }), 404


@app.errorhandler(500)
def internal_error(error):
    return jsonify({
        'success': False,
        'error': 'Internal server error'
    }), 500


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    print("🎨 Starting Wallgen Web Server...")
    print(f"🎭 Style catalog: {list(settings.styles)}")
    print(f"🌐 API will be available at: http://localhost:5000/api/generate")
    print("\n" + "="*50)

    app.run(
        host='0.0.0.0',
        port=5000,
        debug=True,
        threaded=True
    )
