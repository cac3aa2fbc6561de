from datetime import datetime

from flask import Blueprint, current_app, jsonify, request

from liftlog.app import limiter, logger
from liftlog.cycles import resolve_today
from liftlog.fatigue import evaluate
from liftlog.models import parse_datetime
from liftlog.recommendations import recommend

recovery_bp = Blueprint('recovery', __name__)


def _recovery_inputs(data):
    """Shared parsing for the recovery endpoints. Raises ValueError on bad input."""
    log = data.get('log') or []
    sleep = data.get('sleep') or []
    if not isinstance(log, list):
        raise ValueError("'log' must be a list of log entries.")
    if not isinstance(sleep, list):
        raise ValueError("'sleep' must be a list of sleep records.")

    now = parse_datetime(data['now']) if data.get('now') else datetime.now()

    lookback_days = data.get('lookback_days', current_app.config['LIFTLOG_LOOKBACK_DAYS'])
    try:
        lookback_days = int(lookback_days)
    except (TypeError, ValueError):
        raise ValueError("'lookback_days' must be an integer.")
    if lookback_days < 1:
        raise ValueError("'lookback_days' must be 1 or greater.")
    return log, sleep, now, lookback_days


@recovery_bp.route('/v1/recovery/status', methods=['POST'])
@limiter.limit("60 per minute")
def recovery_status_route():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify(error="Request body must be a JSON object"), 400

    try:
        log, sleep, now, lookback_days = _recovery_inputs(data)
        state = evaluate(log, sleep, now, lookback_days, rest_marker=current_app.config['LIFTLOG_REST_MARKER'])
    except ValueError as e:
        return jsonify(error=str(e)), 400

    return jsonify({
        'now': now.isoformat(),
        'lookback_days': lookback_days,
        'muscles': {key: muscle_state.to_dict() for key, muscle_state in state.items()},
    }), 200


@recovery_bp.route('/v1/recovery/recommendation', methods=['POST'])
@limiter.limit("60 per minute")
def recovery_recommendation_route():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify(error="Request body must be a JSON object"), 400

    rest_marker = current_app.config['LIFTLOG_REST_MARKER']
    try:
        log, sleep, now, lookback_days = _recovery_inputs(data)

        planned_workout = data.get('planned_workout')
        if not planned_workout:
            if not data.get('cycle'):
                return jsonify(error="Provide 'planned_workout' or a 'cycle' to resolve it from"), 400
            planned_workout = resolve_today(log, data['cycle'], now.date(), rest_marker)['today']

        state = evaluate(log, sleep, now, lookback_days, rest_marker=rest_marker)
        recommendation = recommend(state, data.get('todays_sleep'), planned_workout)
    except ValueError as e:
        return jsonify(error=str(e)), 400

    logger.info(
        f"Recommendation for {planned_workout}: proceed={recommendation.proceed}, "
        f"sets={recommendation.suggested_sets}"
    )
    return jsonify({
        'planned_workout': planned_workout,
        'recommendation': recommendation.to_dict(),
        'fatigue': {
            key: {
                'name': state[key].name,
                'fatigue_percent': state[key].fatigue_percent,
                'status': state[key].status.name,
                'color': state[key].color,
            }
            for key in recommendation.involved_muscles
            if key in state
        },
    }), 200
