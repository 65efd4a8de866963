from flask import jsonify
from werkzeug.exceptions import HTTPException
from landing_factory.domain.exceptions import LandingFactoryError


def register_error_handlers(app):
    @app.errorhandler(LandingFactoryError)
    def handle_domain_error(error):
        response = jsonify({
            "error": error.kind,
            "message": str(error)
        })
        response.status_code = error.status_code
        return response

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        response = jsonify({
            "error": error.name,
            "message": error.description
        })
        response.status_code = error.code
        return response
