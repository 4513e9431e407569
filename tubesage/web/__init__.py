"""Flask application factory for the TubeSage reading API."""

from flask import Flask, jsonify

from tubesage.payload import DisplayDefaults

DEFAULT_MAX_READINGS = 100


def create_app(
    defaults: DisplayDefaults | None = None,
    max_readings: int = DEFAULT_MAX_READINGS,
) -> Flask:
    """Build the API app.

    Args:
        defaults: Title/description used when a payload omits them.
        max_readings: Readings kept in memory; the oldest is dropped past this.
    """
    if max_readings < 1:
        raise ValueError("max_readings must be at least 1")

    app = Flask(__name__)
    app.config["DISPLAY_DEFAULTS"] = defaults or DisplayDefaults()
    app.config["MAX_READINGS"] = max_readings
    app.config["MAX_CONTENT_LENGTH"] = 16 * 1024 * 1024  # 16 MB
    app.extensions["tubesage_readings"] = {}

    from tubesage.web.routes import bp
    app.register_blueprint(bp)

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({"error": "Not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({"error": "Method not allowed"}), 405

    @app.errorhandler(413)
    def payload_too_large(error):
        return jsonify({"error": "Transcript payload too large"}), 413

    return app
