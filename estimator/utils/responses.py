"""JSON response envelopes shared by every API blueprint."""
from flask import jsonify


def success_response(data=None, status_code=200):
    """{success: true, data}"""
    return jsonify({
        'success': True,
        'data': {} if data is None else data,
    }), status_code


def list_response(items, status_code=200):
    """{success: true, count, data: [...]}"""
    items = list(items)
    return jsonify({
        'success': True,
        'count': len(items),
        'data': items,
    }), status_code


def error_response(message='Server Error', status_code=500):
    """{success: false, error}"""
    return jsonify({
        'success': False,
        'error': message,
    }), status_code
