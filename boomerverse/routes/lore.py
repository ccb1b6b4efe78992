"""
Boomerverse Lore pages, image search proxy and Telegram webhook
"""
import json
import logging

from flask import Blueprint, jsonify, render_template, request

from ..config import config
from ..services import CloudinaryClient, ServiceError, TelegramNotifier

logger = logging.getLogger(__name__)

cloudinary_client = CloudinaryClient.for_service("lore", page_size=config.LORE_PAGE_SIZE)
telegram_notifier = TelegramNotifier()

lore_bp = Blueprint('lore', __name__)

@lore_bp.route("/")
def index():
    return render_template("lore/index.html")

@lore_bp.route("/lore")
def lore_menu():
    return render_template("lore/lore.html")

@lore_bp.route("/history")
def history():
    return render_template("lore/history.html")

@lore_bp.route("/movies")
def movies():
    return render_template("lore/movies.html")

@lore_bp.route("/images")
def images_by_tag():
    """
    Proxy a Cloudinary tag search.
    
    Query params:
    - tag: Tag to search for (required)
    """
    tag = request.args.get("tag")
    if not tag:
        return jsonify({"error": "Missing tag"}), 400
    
    try:
        assets = cloudinary_client.search_by_tag(tag)
    except ServiceError as e:
        logger.exception("Image search for tag %r failed", tag)
        return jsonify({"error": str(e)}), 500
    
    return jsonify({"resources": [asset.raw for asset in assets]})

@lore_bp.route("/moviesImages")
def movies_images():
    return images_by_tag()

@lore_bp.route("/telegram", methods=["GET", "POST", "PUT", "PATCH", "DELETE"])
def telegram_webhook():
    """Reply to the sending chat; the reply outcome never changes the response"""
    try:
        update = json.loads(request.get_data(as_text=True))
    except ValueError:
        return "Bad Request", 400, {"Content-Type": "text/plain; charset=utf-8"}
    
    telegram_notifier.handle_update(update)
    return "Done", 200, {"Content-Type": "text/plain; charset=utf-8"}

@lore_bp.route("/<path:path>")
def fallback(path):
    """Unknown paths land on the main page"""
    return index()
