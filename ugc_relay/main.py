import json
import logging

from flask import Blueprint, Flask, current_app, jsonify, request
from flask_cors import CORS
from marshmallow import ValidationError

from ugc_relay.config import Config
from ugc_relay.email_sender import EmailSender
from ugc_relay.serializer import InquiryRequestSchema, ma

logging.basicConfig()

api_blueprint = Blueprint('api', __name__, url_prefix='/api')


def create_app(email_sender=None, config=Config):
    """
    Build the relay application.

    The email provider client is created here once, from configuration,
    unless one is passed in, and every request reuses that instance.
    """
    app = Flask(__name__)

    log_level = config.LOG_LEVEL.upper()
    app.logger.setLevel(getattr(logging, log_level, logging.WARNING))
    app.config["ENV"] = config.DEPLOY_ENV

    CORS(app)
    ma.init_app(app)

    app.extensions["email_sender"] = email_sender or EmailSender(config)

    app.register_blueprint(api_blueprint)
    app.register_error_handler(404, resource_not_found)
    app.register_error_handler(405, method_not_allowed)
    return app


def resource_not_found(e):
    return jsonify(error=str(e)), 404


def method_not_allowed(e):
    return jsonify(error=str(e)), 405


@api_blueprint.route('/health')
def health():
    return json.dumps({"status": "healthy"})


@api_blueprint.route('/send-email', methods=['POST'])
def send_email():
    email_sender = current_app.extensions["email_sender"]
    try:
        data = json.loads(request.data)
        inquiry = InquiryRequestSchema().load(data)
        result = email_sender.send(inquiry["subject"], inquiry["message"])
    except ValidationError as err:
        logging.error(f"Rejected inquiry payload: {err.messages}")
        return jsonify({"success": False, "error": err.messages}), 500
    except Exception as err:
        logging.error(f"Failed to relay inquiry: {err}")
        return jsonify({"success": False, "error": str(err)}), 500

    return jsonify({"success": True, "data": result}), 200
