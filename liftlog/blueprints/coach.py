from flask import Blueprint, current_app, jsonify, request

from liftlog.app import limiter, logger
from liftlog.library import default_library
from liftlog.progression import suggest

coach_bp = Blueprint('coach', __name__)


@coach_bp.route('/v1/exercises/suggestion', methods=['POST'])
@limiter.limit("60 per minute")
def exercise_suggestion():
    data = request.get_json(silent=True)
    if not data or not isinstance(data, dict):
        return jsonify(error="Request body must be a JSON object"), 400

    exercise_name = data.get('exercise')
    if not exercise_name or not isinstance(exercise_name, str):
        return jsonify(error="Missing 'exercise' in request body"), 400

    sleep_percent = data.get('today_sleep_percent')
    if sleep_percent is not None:
        try:
            sleep_percent = float(sleep_percent)
        except (TypeError, ValueError):
            return jsonify(error="'today_sleep_percent' must be numeric."), 400

    log = data.get('log') or []
    if not isinstance(log, list):
        return jsonify(error="'log' must be a list of log entries."), 400

    try:
        suggestion = suggest(exercise_name, log, sleep_percent, current_app.config['LIFTLOG_REST_MARKER'])
    except ValueError as e:
        return jsonify(error=str(e)), 400

    logger.info(f"Suggestion for {exercise_name}: {suggestion['status']}")
    return jsonify(suggestion), 200


@coach_bp.route('/v1/library/exercises', methods=['GET'])
def library_exercises():
    library = default_library()
    name = request.args.get('name')
    category = request.args.get('category')
    muscle = request.args.get('muscle')

    if name:
        exercise = library.exercise(name)
        if exercise is None:
            return jsonify(error=f"Unknown exercise '{name}'"), 404
        return jsonify(exercise.to_dict()), 200

    if muscle:
        if library.muscle(muscle) is None:
            return jsonify(error=f"Unknown muscle '{muscle}'"), 404
        try:
            min_activation = float(request.args.get('min_activation', 50))
        except ValueError:
            return jsonify(error="'min_activation' must be numeric."), 400
        return jsonify(muscle=muscle, exercises=library.exercises_for_muscle(muscle, min_activation)), 200

    if category:
        return jsonify(category=category, exercises=library.exercises_by_category(category)), 200

    return jsonify(exercises=library.exercise_names()), 200
