import logging

from flask import Flask
from bookings_web.extensions import booking_api
from bookings_web.utils.formatting import format_long_date, format_time_range
from config import Config

THEMES = ('pink', 'classic')


def _validate_config(app):
    theme = app.config.get('UI_THEME')
    if theme not in THEMES:
        raise ValueError(f"UI_THEME must be one of {', '.join(THEMES)}, got {theme!r}")
    if app.config.get('BOOKING_API_TIMEOUT', 0) <= 0:
        raise ValueError(
            f"BOOKING_API_TIMEOUT must be > 0, got {app.config.get('BOOKING_API_TIMEOUT')}"
        )


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)
    _validate_config(app)

    logging.basicConfig(
        level=getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Initialize extensions
    booking_api.init_app(app)

    app.add_template_filter(format_long_date, 'long_date')
    app.add_template_global(format_time_range, 'time_range')

    @app.context_processor
    def inject_theme():
        return {'theme': app.config['UI_THEME']}

    # Register Blueprint
    from bookings_web.bookings import bookings_bp
    app.register_blueprint(bookings_bp)

    from bookings_web.errors import register_error_handlers
    register_error_handlers(app)

    return app
