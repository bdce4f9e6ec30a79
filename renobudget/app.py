# renobudget/app.py
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException
from .api.routes import bp
from .api.summary import bp as summary_bp
from .utils.config import settings
from .utils.logging import get_logger
from .domain.errors import AppError, InvalidConfiguration

log = get_logger(__name__)

CALCULATION_FAILED = "An error occurred while calculating. Please check your inputs and try again."

def create_app():
    app = Flask(__name__)

    app.register_blueprint(bp)
    app.register_blueprint(summary_bp)

    @app.errorhandler(InvalidConfiguration)
    def handle_invalid_configuration(err: InvalidConfiguration):
        log.error(f"InvalidConfiguration: {err.message}")
        return jsonify({"error": CALCULATION_FAILED}), err.status_code

    @app.errorhandler(AppError)
    def handle_app_error(err: AppError):
        log.warning(f"AppError: {err.message}")
        return jsonify({"error": err.message}), err.status_code

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        if isinstance(e, HTTPException):
            return e
        log.exception("Unhandled error")
        return jsonify({"error": "internal_error"}), 500

    return app

# For `flask run`
app = create_app()

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=settings.PORT, debug=settings.ENV == "dev")
