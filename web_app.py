from flask import Flask, Blueprint, current_app, request, jsonify
from flask_cors import CORS
import logging

from feedback_system.chat import ChatClient
from feedback_system.config import Settings, configure_logging
from feedback_system.errors import NotFoundError, StorageError, ValidationError, RemoteProviderError
from feedback_system.store import FeedbackStore
from analytics.feedback_analytics import FeedbackAnalytics

logger = logging.getLogger(__name__)

api = Blueprint('api', __name__, url_prefix='/api')


def get_store() -> FeedbackStore:
    return current_app.extensions['feedback_store']


def get_chat_client() -> ChatClient:
    return current_app.extensions['chat_client']


def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


@api.route('/health', methods=['GET'])
def health():
    return jsonify({'status': 'ok'})


@api.route('/feedback', methods=['GET'])
def list_feedback():
    try:
        records = get_store().list()
    except StorageError as e:
        logger.exception("Failed to read feedback data")
        return jsonify({'error': 'Failed to read feedback data'}), e.status_code
    return jsonify([record.to_dict() for record in records])


@api.route('/feedback/stats', methods=['GET'])
def feedback_stats():
    try:
        summary = FeedbackAnalytics(get_store()).get_summary()
    except StorageError as e:
        logger.exception("Failed to read feedback data")
        return jsonify({'error': 'Failed to read feedback data'}), e.status_code
    return jsonify(summary)


@api.route('/feedback/<feedback_id>', methods=['GET'])
def get_feedback(feedback_id):
    try:
        record = get_store().get(feedback_id)
    except NotFoundError as e:
        return jsonify({'error': str(e)}), e.status_code
    except StorageError as e:
        logger.exception("Failed to read feedback data")
        return jsonify({'error': 'Failed to read feedback data'}), e.status_code
    return jsonify(record.to_dict())


@api.route('/feedback', methods=['POST'])
def create_feedback():
    data = _json_body()
    try:
        # id, status and createdAt are assigned server-side; anything the client sent is ignored
        record = get_store().create(
            name=data.get('name'),
            email=data.get('email'),
            message=data.get('message'),
            type=data.get('type'),
        )
    except ValidationError as e:
        return jsonify({'error': 'All fields are required'}), e.status_code
    except StorageError as e:
        logger.exception("Failed to save feedback")
        return jsonify({'error': 'Failed to save feedback'}), e.status_code
    return jsonify(record.to_dict()), 201


@api.route('/feedback/<feedback_id>', methods=['PUT'])
def update_feedback(feedback_id):
    data = _json_body()
    try:
        record = get_store().update_status(feedback_id, data.get('status'))
    except (ValidationError, NotFoundError) as e:
        return jsonify({'error': str(e)}), e.status_code
    except StorageError as e:
        logger.exception("Failed to update feedback %s", feedback_id)
        return jsonify({'error': 'Failed to update feedback'}), e.status_code
    return jsonify(record.to_dict())


@api.route('/feedback/<feedback_id>', methods=['DELETE'])
def delete_feedback(feedback_id):
    try:
        get_store().delete(feedback_id)
    except NotFoundError as e:
        return jsonify({'error': str(e)}), e.status_code
    except StorageError as e:
        logger.exception("Failed to delete feedback %s", feedback_id)
        return jsonify({'error': 'Failed to delete feedback'}), e.status_code
    return jsonify({'success': True})


@api.route('/chat', methods=['POST'])
def chat():
    message = _json_body().get('message')
    if not isinstance(message, str):
        return jsonify({'error': 'Message must be a string'}), 400

    try:
        reply = get_chat_client().send(message)
    except RemoteProviderError as e:
        logger.exception("Gemini API Error")
        return jsonify({'error': 'Internal Server Error'}), e.status_code
    return jsonify({'response': reply})


def create_app(settings: Settings = None, store: FeedbackStore = None, chat_client: ChatClient = None) -> Flask:
    settings = settings or Settings.from_env()

    app = Flask(__name__)
    CORS(app)

    app.extensions['settings'] = settings
    app.extensions['feedback_store'] = store or FeedbackStore(settings.data_file)
    app.extensions['chat_client'] = chat_client or ChatClient(
        api_key=settings.gemini_api_key,
        model_name=settings.gemini_model,
    )
    app.register_blueprint(api)
    return app


app = create_app()

if __name__ == '__main__':
    settings = app.extensions['settings']
    configure_logging(settings.log_level)

    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY not found in environment; /api/chat will return 500.")

    logger.info("Feedback data file: %s", app.extensions['feedback_store'].path)
    logger.info("Server running on http://localhost:%s", settings.port)
    app.run(port=settings.port, threaded=True)
