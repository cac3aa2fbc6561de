from flask import Flask, jsonify
import os
import logging
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from werkzeug.exceptions import HTTPException

from liftlog.constants import DEFAULT_LOOKBACK_DAYS, REST

app = Flask(__name__)

# --- Engine Configuration ---
app.config['LIFTLOG_LOOKBACK_DAYS'] = int(os.getenv('LIFTLOG_LOOKBACK_DAYS', DEFAULT_LOOKBACK_DAYS))
app.config['LIFTLOG_REST_MARKER'] = os.getenv('LIFTLOG_REST_MARKER', REST)

# --- Rate Limiter Configuration ---
# In-memory by default; point at Redis when running several workers
RATELIMIT_STORAGE_URL = os.getenv("RATELIMIT_STORAGE_URL", "memory://")
DEFAULT_LIMITS = [
    limit.strip()
    for limit in os.getenv("LIFTLOG_DEFAULT_LIMITS", "200 per day;50 per hour").split(';')
    if limit.strip()
]
app.config['RATELIMIT_ENABLED'] = os.getenv('RATELIMIT_ENABLED', 'true').lower() not in ('0', 'false', 'no')
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=DEFAULT_LIMITS,
    storage_uri=RATELIMIT_STORAGE_URL,
    strategy="fixed-window",
)
limiter.init_app(app)

# Configure logging
logging.basicConfig(level=getattr(logging, os.getenv('LIFTLOG_LOG_LEVEL', 'INFO').upper(), logging.INFO))
# Use app.logger directly as it's configured by Flask
logger = app.logger


@app.errorhandler(ValueError)
def handle_value_error(e):
    """Malformed log, sleep or cycle data in a request body."""
    logger.info(f"Rejected request with invalid input: {e}")
    return jsonify(error=str(e)), 400


@app.errorhandler(Exception)
def handle_exception(e):
    """Generic exception handler."""
    if isinstance(e, HTTPException):
        # 404, 405, 429 from the rate limiter and friends keep their status
        return jsonify(error=e.description), e.code
    app.logger.error(f"Unhandled exception: {e}", exc_info=True)
    return jsonify(error="An internal server error occurred"), 500


@app.route('/health', methods=['GET'])
@limiter.exempt
def health():
    return jsonify(status="ok")


# Import blueprints once the limiter exists; they decorate routes with it
from liftlog.blueprints.cycle import cycle_bp  # noqa: E402
from liftlog.blueprints.coach import coach_bp  # noqa: E402
from liftlog.blueprints.recovery import recovery_bp  # noqa: E402
from liftlog.blueprints.analytics import analytics_bp  # noqa: E402

app.register_blueprint(cycle_bp)
app.register_blueprint(coach_bp)
app.register_blueprint(recovery_bp)
app.register_blueprint(analytics_bp)

