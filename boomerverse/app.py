#!/usr/bin/env python3
"""
Boomerverse Flask application factory
One process per service: radio, lore or roulette
"""
import argparse
import sys

from flask import Flask

from .config import config
from .routes import register_routes
from .utils import configure_logging

def create_app(service: str) -> Flask:
    """
    Build the Flask app for one service.
    
    Raises:
        ValueError: If the service name is unknown
    """
    if service not in config.SERVICES:
        raise ValueError(f"unknown service: {service}")
    
    configure_logging(config.LOG_LEVEL)
    
    app = Flask(__name__)
    app.config['SERVICE_NAME'] = service
    register_routes(app, service)
    return app

def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Run a Boomerverse web service")
    parser.add_argument("service", choices=config.SERVICES)
    parser.add_argument("--host", default=config.HOST)
    parser.add_argument("--port", type=int, default=config.PORT)
    args = parser.parse_args(argv)
    
    app = create_app(args.service)
    
    print(f"🎵 Boomerverse {args.service} service starting...")
    print(f"📡 Server: {args.host}:{args.port}")
    
    app.run(host=args.host, port=args.port, debug=False)
    return 0

if __name__ == "__main__":
    sys.exit(main())
