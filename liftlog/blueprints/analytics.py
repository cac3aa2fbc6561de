from flask import Blueprint, current_app, jsonify, request

from liftlog.analytics import personal_records, session_summary, volume_comparison
from liftlog.app import limiter
from liftlog.models import normalize_log, parse_date

analytics_bp = Blueprint('analytics', __name__)


@analytics_bp.route('/v1/analytics/prs', methods=['POST'])
@limiter.limit("60 per hour")
def personal_records_route():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify(error="Request body must be a JSON object"), 400
    log = data.get('log') or []
    if not isinstance(log, list):
        return jsonify(error="'log' must be a list of log entries."), 400

    try:
        records = personal_records(log, current_app.config['LIFTLOG_REST_MARKER'])
    except ValueError as e:
        return jsonify(error=str(e)), 400
    return jsonify(personal_records=records), 200


@analytics_bp.route('/v1/analytics/volume-comparison', methods=['POST'])
@limiter.limit("60 per hour")
def volume_comparison_route():
    data = request.get_json(silent=True)
    if not data or not isinstance(data, dict):
        return jsonify(error="Request body must be a JSON object"), 400
    if not data.get('date'):
        return jsonify(error="Missing 'date' in request body"), 400
    log = data.get('log') or []
    if not isinstance(log, list):
        return jsonify(error="'log' must be a list of log entries."), 400

    rest_marker = current_app.config['LIFTLOG_REST_MARKER']
    try:
        on_date = parse_date(data['date'])
        entries = normalize_log(log, rest_marker)
        matching = [entry for entry in entries if entry.date == on_date]
        if not matching:
            return jsonify(error=f"No log entry on {on_date.isoformat()}"), 404
        entry = matching[-1]
        comparison = volume_comparison(entry, entries, rest_marker)
        summary = session_summary(entry, data.get('sleep') or [], rest_marker)
    except ValueError as e:
        return jsonify(error=str(e)), 400

    return jsonify(date=on_date.isoformat(), comparison=comparison, summary=summary), 200
