"""
Web API for waste classification
Proxies images and questions to Gemini and serves manual and offline classifications
"""
import logging
import os

from dotenv import load_dotenv
from flask import Flask, jsonify, request
from flask_cors import CORS
from PIL import Image, UnidentifiedImageError

from fallback_classifier import answer_offline, classify_offline
from gemini_classifier import WasteClassifier
from manual_classifier import build_from_manual_input
from waste_types import POINTS_BY_CATEGORY, DEFAULT_POINTS, WasteCategory, calculate_points

load_dotenv()

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config['MAX_CONTENT_LENGTH'] = 16 * 1024 * 1024  # 16MB max file size
app.config['ALLOWED_EXTENSIONS'] = {'png', 'jpg', 'jpeg', 'gif', 'webp'}

DEFAULT_CORS_ORIGINS = (
    "http://localhost:8081,http://localhost:3000,http://127.0.0.1:8081,"
    "http://localhost:8080,http://127.0.0.1:8080"
)
cors_origins = os.getenv('CORS_ORIGINS', DEFAULT_CORS_ORIGINS)
CORS(app, origins=[origin.strip() for origin in cors_origins.split(',') if origin.strip()])

_classifier = None
_classifier_error = None


def get_classifier():
    """
    Return the shared Gemini classifier, or None when Gemini is not configured.
    Construction is attempted once; later calls reuse the outcome.
    """
    global _classifier, _classifier_error
    if _classifier is None and _classifier_error is None:
        try:
            _classifier = WasteClassifier()
        except ValueError as e:
            _classifier_error = str(e)
            logger.warning("Gemini unavailable, serving offline classifications: %s", e)
    return _classifier


def allowed_file(filename):
    """Check if file extension is allowed"""
    return '.' in filename and \
           filename.rsplit('.', 1)[1].lower() in app.config['ALLOWED_EXTENSIONS']


def _classification_response(result):
    return {
        'classification': result.to_dict(),
        'points': calculate_points(result.waste_type),
    }


@app.route('/')
def index():
    return 'Server is running. Send images to /analyze-image endpoint.'


@app.route('/categories', methods=['GET'])
def get_categories():
    """List the waste taxonomy with the points each category earns"""
    categories = [
        {'name': category.value, 'points': POINTS_BY_CATEGORY.get(category, DEFAULT_POINTS)}
        for category in WasteCategory
        if category is not WasteCategory.UNKNOWN
    ]
    return jsonify({'categories': categories})


@app.route('/analyze-image', methods=['POST'])
def analyze_image():
    """Classify an uploaded waste photo"""
    if 'image' not in request.files:
        return jsonify({'error': 'No image uploaded'}), 400

    file = request.files['image']
    if file.filename == '':
        return jsonify({'error': 'No file selected'}), 400

    if not allowed_file(file.filename):
        return jsonify({'error': 'Invalid file type. Allowed: PNG, JPG, JPEG, GIF, WEBP'}), 400

    prompt = request.form.get('prompt') or None
    hint = request.form.get('hint', '')

    # Decoded in memory, nothing is written to disk
    try:
        image = Image.open(file.stream)
        image.load()
    except (UnidentifiedImageError, OSError) as e:
        logger.info("Rejected unreadable upload %s: %s", file.filename, e)
        return jsonify({'error': 'Uploaded file is not a readable image'}), 400

    with image:
        classifier = get_classifier()
        if classifier is None:
            result = classify_offline(hint)
        else:
            result = classifier.classify_image(image, hint=hint, prompt=prompt)

    body = _classification_response(result)
    body['analysis'] = result.raw_analysis
    return jsonify(body)


@app.route('/analyze-text', methods=['POST'])
def analyze_text():
    """Answer a free-text waste disposal question"""
    data = request.get_json(silent=True) or {}
    prompt = data.get('prompt')
    if not isinstance(prompt, str) or not prompt.strip():
        return jsonify({'error': 'No prompt provided'}), 400

    classifier = get_classifier()
    if classifier is None:
        answer = answer_offline(prompt)
    else:
        answer = classifier.ask_about_waste(prompt)

    body = answer.to_dict()
    body['analysis'] = answer.answer
    return jsonify(body)


@app.route('/classify-manual', methods=['POST'])
def classify_manual():
    """Build a classification from a user-selected category"""
    data = request.get_json(silent=True) or {}
    category = data.get('category')
    description = data.get('description') or ''

    if not isinstance(category, str) or not category.strip():
        return jsonify({'error': 'Please select a waste type'}), 400
    if not isinstance(description, str):
        return jsonify({'error': 'Description must be text'}), 400

    result = build_from_manual_input(category, description)
    return jsonify(_classification_response(result))


if __name__ == '__main__':
    logging.basicConfig(level=os.getenv('LOG_LEVEL', 'INFO'))
    port = int(os.environ.get('PORT', 4000))
    logger.info("Server starting on http://localhost:%s", port)
    app.run(debug=True, host='0.0.0.0', port=port)
