import os
import logging
from flask import Flask, jsonify, request
from flask_cors import CORS
from dotenv import load_dotenv

from domain.constants import DEFAULT_WIDTH, DEFAULT_HEIGHT, LEADERBOARD_SIZE
from domain.errors import BoardFull, InvalidDimensions, InvalidDirection
from services.leaderboard import Leaderboard, InvalidScore
from services.session_store import SessionStore, SessionNotFound

load_dotenv()

app = Flask(__name__, static_folder="static", static_url_path="/static")
logging.basicConfig(level=logging.INFO)


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        logging.warning(f"Ignoring non-integer {name}={value!r}, using {default}")
        return default


# Enable CORS for the JSON routes so a client served from another origin can call Flask
# Allowed origins can be configured via CORS_ALLOWED_ORIGINS env var (comma-separated)
allowed_origins_env = os.getenv("CORS_ALLOWED_ORIGINS")
if allowed_origins_env:
    allowed_origins = [o.strip() for o in allowed_origins_env.split(",") if o.strip()]
else:
    # sensible defaults for local dev
    allowed_origins = [
        "http://localhost:8080",
        "http://127.0.0.1:8080",
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

CORS(app, origins=allowed_origins)

idle_minutes = _env_int("SNAKE_SESSION_IDLE_MINUTES", 30)

sessions = SessionStore(
    default_width=_env_int("SNAKE_BOARD_WIDTH", DEFAULT_WIDTH),
    default_height=_env_int("SNAKE_BOARD_HEIGHT", DEFAULT_HEIGHT),
    idle_timeout=idle_minutes * 60 if idle_minutes > 0 else None,
)
leaderboard = Leaderboard(size=LEADERBOARD_SIZE)


def _not_found(session_id):
    return jsonify({"error": f"Game '{session_id}' not found"}), 404


def _parse_direction_body(payload):
    """
    Direction bodies are either a bare JSON string ("Up") or an object
    with a "direction" key.
    """
    if isinstance(payload, dict):
        return payload.get("direction")
    return payload


@app.route("/", methods=["GET"])
def index():
    """Serve the browser client."""
    return app.send_static_file("index.html")


@app.route("/health", methods=["GET"])
def health():
    return jsonify({"status": "healthy"})


@app.route("/new-game", methods=["POST"])
def new_game():
    """
    Create a new game and return its session id.

    Optional JSON body:
    - width, height: board size (defaults come from SNAKE_BOARD_WIDTH/HEIGHT)
    """
    payload = request.get_json(silent=True) or {}
    if not isinstance(payload, dict):
        return jsonify({"error": "Request body must be a JSON object"}), 400

    width = payload.get("width")
    height = payload.get("height")
    for value in (width, height):
        if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
            return jsonify({"error": "width and height must be integers"}), 400

    try:
        session_id = sessions.create(width=width, height=height)
    except (InvalidDimensions, BoardFull) as e:
        return jsonify({"error": str(e)}), 400
    except Exception as error:
        logging.error(f"Error creating game: {error}")
        return jsonify({"error": "Failed to create game"}), 500

    return jsonify({"session_id": session_id})


@app.route("/game/<session_id>", methods=["GET"])
def get_game_state(session_id):
    """Return the current state of a game."""
    try:
        with sessions.locked(session_id) as game:
            return jsonify(game.to_dict())
    except SessionNotFound:
        return _not_found(session_id)


@app.route("/game/<session_id>", methods=["DELETE"])
def delete_game(session_id):
    """Discard a game before it is evicted for inactivity."""
    try:
        sessions.delete(session_id)
    except SessionNotFound:
        return _not_found(session_id)
    return "", 204


@app.route("/direction/<session_id>", methods=["POST"])
def update_direction(session_id):
    """
    Change the snake's heading. Does not advance the game.

    Reversing into the snake's own neck is accepted; the next tick ends
    the game.
    """
    direction = _parse_direction_body(request.get_json(silent=True))
    try:
        with sessions.locked(session_id) as game:
            game.set_direction(direction)
    except SessionNotFound:
        return _not_found(session_id)
    except InvalidDirection as e:
        return jsonify({"error": str(e)}), 400

    return "", 200


@app.route("/update/<session_id>", methods=["POST"])
def update_game(session_id):
    """Advance a game by one tick and return the new state."""
    try:
        with sessions.locked(session_id) as game:
            was_over = game.game_over
            game.tick()
            if game.game_over and not was_over:
                logging.info(f"Game {session_id} over ({game.death_reason}), score {game.score}")
            return jsonify(game.to_dict())
    except SessionNotFound:
        return _not_found(session_id)
    except Exception as error:
        logging.error(f"Error updating game {session_id}: {error}")
        return jsonify({"error": "Failed to update game"}), 500


@app.route("/ai-move/<session_id>", methods=["POST"])
def ai_move(session_id):
    """Let the greedy AI pick a direction, then tick once, under one lock."""
    try:
        with sessions.locked(session_id) as game:
            was_over = game.game_over
            game.choose_ai_direction()
            game.tick()
            if game.game_over and not was_over:
                logging.info(f"Game {session_id} over ({game.death_reason}), score {game.score}")
            return jsonify(game.to_dict())
    except SessionNotFound:
        return _not_found(session_id)
    except Exception as error:
        logging.error(f"Error making AI move for game {session_id}: {error}")
        return jsonify({"error": "Failed to make AI move"}), 500


@app.route("/submit-score", methods=["POST"])
def submit_score():
    """
    Submit a score to the leaderboard.

    JSON body:
    - name: player name
    - score: non-negative integer

    Returns the leaderboard after the submission (top 10, highest first).
    """
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return jsonify({"error": "Request body must be a JSON object"}), 400

    try:
        entries = leaderboard.submit(payload.get("name"), payload.get("score"))
    except InvalidScore as e:
        return jsonify({"error": str(e)}), 400

    return jsonify(entries)


@app.route("/leaderboard", methods=["GET"])
def get_leaderboard():
    return jsonify(leaderboard.entries())


if __name__ == "__main__":
    # Same argument and FLASK_DEBUG handling as main.py
    from main import main
    main()
