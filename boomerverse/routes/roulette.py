"""
Content Bob image roulette
"""
import logging

from flask import Blueprint, jsonify, render_template, request

from ..config import config
from ..services import (
    CloudinaryClient, ImageFetcher, ImagePicker, RecentlyShown, ServiceError,
)

logger = logging.getLogger(__name__)

cloudinary_client = CloudinaryClient.for_service("roulette", page_size=config.ROULETTE_PAGE_SIZE)
image_picker = ImagePicker(RecentlyShown(capacity=config.RECENT_CAPACITY))
image_fetcher = ImageFetcher()

roulette_bp = Blueprint('roulette', __name__)

@roulette_bp.route("/")
def index():
    return render_template("roulette/index.html", modes=sorted(config.MODE_TAGS))

@roulette_bp.route("/random", methods=["GET"])
def random_image():
    """
    Pick a random image for a mode.
    
    Query params:
    - mode: engage, meme or profiles (default: engage)
    
    The meme mode returns two images.
    """
    mode = (request.args.get("mode") or config.DEFAULT_MODE).lower()
    tag = config.MODE_TAGS.get(mode, "")
    
    try:
        candidates = cloudinary_client.search_by_tag(tag)
    except ServiceError as e:
        logger.exception("Random pick for mode %r failed", mode)
        return jsonify({"error": str(e)}), 500
    
    if not candidates:
        return jsonify({"error": "No images found"}), 200
    
    if mode == "meme":
        picks = image_picker.pick_many(candidates, config.MEME_PICKS)
        return jsonify({"images": [cloudinary_client.direct_link(p) for p in picks]})
    
    picked = image_picker.pick(candidates)
    return jsonify({"image": cloudinary_client.direct_link(picked)})

@roulette_bp.route("/dataurl", methods=["GET"])
def data_url():
    """Convert a remote image into a data URL"""
    image_url = request.args.get("img")
    if not image_url:
        return jsonify({"error": "Missing img param"}), 400
    
    try:
        encoded = image_fetcher.to_data_url(image_url)
    except ServiceError as e:
        logger.exception("Data URL conversion failed for %s", image_url)
        return jsonify({"error": str(e)}), 500
    
    return jsonify({"dataUrl": encoded})

@roulette_bp.route("/<path:path>")
def fallback(path):
    """Unknown paths land on the main page"""
    return index()
