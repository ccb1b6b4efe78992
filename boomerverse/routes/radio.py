"""
Boomer FM radio page
"""
from flask import Blueprint, make_response, render_template

from ..services import RadioService

radio_service = RadioService()

radio_bp = Blueprint('radio', __name__)

@radio_bp.route("/")
def index():
    """Render now playing, up next, recently played and top tracks"""
    snapshot = radio_service.snapshot()
    response = make_response(render_template("radio.html", radio=snapshot))
    
    # Track data changes with every song
    response.headers['Cache-Control'] = 'no-cache, no-store, must-revalidate'
    response.headers['Pragma'] = 'no-cache'
    response.headers['Expires'] = '0'
    
    return response
