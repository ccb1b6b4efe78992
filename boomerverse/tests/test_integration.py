"""
Integration tests for the application factory and CLI
"""
import json
import unittest
from unittest.mock import patch

from flask import Flask

from boomerverse import create_app
from boomerverse.app import main

class TestApplicationIntegration(unittest.TestCase):
    
    def test_app_initialization(self):
        """Test each service builds its own Flask app"""
        for service in ("radio", "lore", "roulette"):
            app = create_app(service)
            self.assertIsInstance(app, Flask)
            self.assertEqual(app.config['SERVICE_NAME'], service)
    
    def test_unknown_service(self):
        """Test the factory rejects unknown services"""
        with self.assertRaises(ValueError):
            create_app("jukebox")
    
    def test_health_route(self):
        """Test every service answers the health check"""
        for service in ("radio", "lore", "roulette"):
            client = create_app(service).test_client()
            response = client.get('/health')
            
            self.assertEqual(response.status_code, 200)
            data = json.loads(response.data)
            self.assertEqual(data['status'], 'healthy')
            self.assertEqual(data['service'], service)
            self.assertIsInstance(data['timestamp'], int)
    
    def test_services_do_not_share_routes(self):
        """Test each app only exposes its own endpoints"""
        endpoints = {
            service: {rule.rule for rule in create_app(service).url_map.iter_rules()}
            for service in ("radio", "lore", "roulette")
        }
        
        self.assertIn('/telegram', endpoints['lore'])
        self.assertNotIn('/telegram', endpoints['roulette'])
        self.assertIn('/random', endpoints['roulette'])
        self.assertNotIn('/random', endpoints['lore'])
        self.assertNotIn('/images', endpoints['radio'])
    
    def test_main_runs_selected_service(self):
        """Test the CLI builds the requested app and binds host/port"""
        with patch('flask.Flask.run') as mock_run:
            exit_code = main(['lore', '--host', '127.0.0.1', '--port', '8088'])
        
        self.assertEqual(exit_code, 0)
        mock_run.assert_called_once_with(host='127.0.0.1', port=8088, debug=False)
    
    def test_main_rejects_unknown_service(self):
        """Test argparse refuses services it does not know"""
        with self.assertRaises(SystemExit):
            main(['jukebox'])

if __name__ == '__main__':
    unittest.main()
