"""
Health check shared by every service
"""
import time

from flask import Blueprint, current_app, jsonify

health_bp = Blueprint('health', __name__)

@health_bp.route("/health", methods=["GET"])
def health():
    """Health check endpoint for monitoring"""
    return jsonify({
        "status": "healthy",
        "service": current_app.config.get("SERVICE_NAME"),
        "timestamp": int(time.time()),
    })
