"""
Portfolio - Main Application Entry Point
Application Factory Pattern for a single-page portfolio site

This module initializes the Flask application with its configuration,
extensions and middleware. All route handling is delegated to blueprints.
"""

import os
from datetime import datetime
from flask import Flask, request, jsonify, render_template
from config import get_config
from extensions import contact_flows
from utils.rendering import get_page_specific_class

# Import all blueprints
from blueprints.pages import pages_bp
from blueprints.contact import contact_bp


def create_app(config_name=None, transport=None, timer_factory=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)
        transport (callable, optional): Replaces the EmailJS client for every contact flow
        timer_factory (callable, optional): Replaces threading.Timer for the banner timer

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    conf = get_config(config_name)
    app.config.from_object(conf)

    # Initialize extensions with app
    initialize_extensions(app, transport=transport, timer_factory=timer_factory)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio application is running'}, 200

    return app


def initialize_extensions(app, transport=None, timer_factory=None):
    """Initialize Flask extensions with the app instance"""
    options = {'transport': transport}
    if timer_factory is not None:
        options['timer_factory'] = timer_factory
    contact_flows.init_app(app, **options)
    app.logger.info(
        f"✓ Contact form bound to EmailJS service {app.config['EMAILJS_SERVICE_ID']}")


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(pages_bp)
    app.register_blueprint(contact_bp)


def register_error_handlers(app):
    """Register custom error handlers"""

    @app.errorhandler(404)
    def page_not_found(e):
        if request.accept_mimetypes.best == 'application/json':
            return jsonify({'error': 'Not found'}), 404
        return render_template('error.html', code=404, message='Page not found'), 404

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        if request.accept_mimetypes.best == 'application/json':
            return jsonify({'error': 'Internal server error'}), 500
        return render_template('error.html', code=500, message='Something went wrong'), 500


def register_hooks(app):
    """Register request/response hooks and context processors"""

    @app.context_processor
    def inject_global_vars():
        """Values available to every template"""
        page_class = get_page_specific_class(
            request.blueprint,
            request.endpoint.split('.')[-1] if request.endpoint else None
        )
        return {
            'current_year': datetime.now().year,
            'page_class': page_class,
            'default_meta': {
                'title': 'Alex Morgan | Full-Stack Software Engineer',
                'description': 'Portfolio, experience and contact details for Alex Morgan.',
            },
        }

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['Content-Security-Policy'] = (
            "default-src 'self'; "
            "script-src 'self' https://cdn.jsdelivr.net; "
            "style-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net https://cdnjs.cloudflare.com; "
            "font-src 'self' https://cdnjs.cloudflare.com; "
            "img-src 'self' data:; "
            "connect-src 'self';"
        )
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'
        return response


if __name__ == '__main__':
    # Get environment
    env = os.environ.get('FLASK_ENV', 'development')

    # Create app
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=5000,
        debug=(env == 'development')
    )
