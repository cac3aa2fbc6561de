from flask import Blueprint, current_app, jsonify, request

from liftlog.app import limiter, logger
from liftlog.cycles import list_presets, planned_for_date, resolve_today

cycle_bp = Blueprint('cycle', __name__)


def _log_and_cycle(data):
    log = data.get('log') or []
    cycle = data.get('cycle')
    if not isinstance(log, list):
        raise ValueError("'log' must be a list of log entries.")
    if not cycle:
        raise ValueError("Missing 'cycle' in request body")
    return log, cycle


@cycle_bp.route('/v1/cycle/today', methods=['POST'])
@limiter.limit("60 per minute")
def cycle_today():
    data = request.get_json(silent=True)
    if not data or not isinstance(data, dict):
        return jsonify(error="Request body must be a JSON object"), 400

    try:
        log, cycle = _log_and_cycle(data)
        result = resolve_today(log, cycle, data.get('today'), current_app.config['LIFTLOG_REST_MARKER'])
    except ValueError as e:
        return jsonify(error=str(e)), 400

    result['branch'] = result['branch'].value
    logger.info(f"Resolved today's workout: {result['today']} (index {result['cycle_index']}, {result['branch']})")
    return jsonify(result), 200


@cycle_bp.route('/v1/cycle/planned', methods=['POST'])
@limiter.limit("60 per minute")
def cycle_planned():
    data = request.get_json(silent=True)
    if not data or not isinstance(data, dict):
        return jsonify(error="Request body must be a JSON object"), 400
    if not data.get('date'):
        return jsonify(error="Missing 'date' in request body"), 400

    try:
        log, cycle = _log_and_cycle(data)
        result = planned_for_date(log, cycle, data['date'], current_app.config['LIFTLOG_REST_MARKER'])
    except ValueError as e:
        return jsonify(error=str(e)), 400
    return jsonify(result), 200


@cycle_bp.route('/v1/cycle/presets', methods=['GET'])
def cycle_presets():
    return jsonify(presets=list_presets()), 200
