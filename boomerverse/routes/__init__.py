"""
Route modules for the Boomerverse web services
"""
from .health import health_bp
from .radio import radio_bp
from .lore import lore_bp
from .roulette import roulette_bp

BLUEPRINTS = {
    'radio': radio_bp,
    'lore': lore_bp,
    'roulette': roulette_bp,
}

def register_routes(app, service: str):
    """Register the health check and the blueprint for one service"""
    if service not in BLUEPRINTS:
        raise ValueError(f"unknown service: {service}")
    
    app.register_blueprint(health_bp)
    app.register_blueprint(BLUEPRINTS[service])

__all__ = ['register_routes', 'BLUEPRINTS']
