import logging
import os
import sys
import uuid

from flask import Flask, request, jsonify
from flask_cors import CORS
from google import genai
from werkzeug.exceptions import HTTPException

from backend.ats_review.config import Settings, load_settings
from backend.ats_review.errors import ConfigError
from backend.ats_review.judge import ResumeJudge
from backend.ats_review.logging_config import setup_logging
from backend.ats_review.pipeline import process_resume

logger = logging.getLogger(__name__)


def create_app(settings: Settings, client=None) -> Flask:
    """
    Build the Flask app.

    Args:
        settings: Loaded Settings
        client: Gemini client; built from settings.api_key when omitted
    """
    if client is None:
        client = genai.Client(api_key=settings.require_api_key())

    app = Flask(__name__)
    CORS(app, origins=settings.cors_origins)  # Allow Frontend connection
    app.json.sort_keys = False

    judge = ResumeJudge(
        client,
        model_name=settings.model_name,
        timeout=settings.ai_timeout,
    )
    app.extensions["resume_judge"] = judge

    os.makedirs(settings.upload_folder, exist_ok=True)

    @app.errorhandler(Exception)
    def handle_error(e):
        if isinstance(e, HTTPException):
            return e
        logger.error(f"Server Error: {type(e).__name__}: {e}", exc_info=True)
        return jsonify({"error": str(e) or type(e).__name__}), 500

    @app.route('/', methods=['GET'])
    def home():
        return jsonify({"status": "ok"})

    @app.route('/extract-text', methods=['POST'])
    async def extract_text():
        file = request.files.get('resume')
        if file is None or file.filename == '':
            return jsonify({"error": "No resume file uploaded"}), 500

        filepath = os.path.join(settings.upload_folder, uuid.uuid4().hex)
        try:
            file.save(filepath)
            result = await process_resume(
                filepath,
                request.form.get('jobDescription'),
                judge,
                categorizer_mode=settings.categorizer_mode,
            )
        finally:
            try:
                if os.path.exists(filepath):
                    os.remove(filepath)
            except OSError as e:
                logger.warning(f"Could not delete upload {filepath}: {e}")

        if not result.ok:
            return jsonify({"error": result.error}), 500
        return jsonify(result.payload)

    return app


def main():
    try:
        settings = load_settings()
        settings.require_api_key()
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging(settings.log_level, settings.log_file)
    app = create_app(settings)

    logger.info(f"Server is running at port: {settings.port}")
    app.run(host=settings.host, port=settings.port)


if __name__ == '__main__':
    main()
