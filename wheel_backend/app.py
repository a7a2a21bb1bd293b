import os

from flask import Flask, jsonify
from flask_cors import CORS

from creator_wheel import config
from .wheel_route import register_wheel_routes

DEFAULT_ORIGINS = [
    "https://calendar.psyhackers.org",
]


def allowed_origins():
    origins_env = os.environ.get("CORS_ORIGINS", "").strip()
    if origins_env:
        return [o.strip() for o in origins_env.split(",") if o.strip()]
    return list(DEFAULT_ORIGINS)


def create_app() -> Flask:
    app = Flask(__name__)
    # CORS on every route so error responses carry the headers too
    CORS(app, resources={r"/*": {"origins": allowed_origins()}}, supports_credentials=False)
    register_wheel_routes(app)

    @app.route('/health', methods=['GET'])
    def health():
        return jsonify({
            "status": "ok",
            "timezone": config.REFERENCE_TIMEZONE,
            "daynight_model": config.DAYNIGHT_MODEL,
        })

    return app


app = create_app()

if __name__ == '__main__':
    app.run(host="0.0.0.0", port=int(os.environ.get("PORT", 5000)), debug=config.DEBUG)
