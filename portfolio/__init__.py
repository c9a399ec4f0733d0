# portfolio/__init__.py
import logging
import os
from flask import Flask, g, jsonify, current_app
from dotenv import load_dotenv
from flask_cors import CORS
from sqlalchemy.orm import Session

from .db.engine import make_engine, make_session_factory, init_db


def _env_flag(name: str, default: bool) -> bool:
    v = os.environ.get(name)
    if v is None:
        return default
    return v.strip().lower() in {"1", "true", "yes", "on"}


def create_app(test_config=None):
    load_dotenv()
    app = Flask(__name__)

    # ---- Config ----
    app.config.from_mapping(
        DATABASE_URL=os.environ.get("DATABASE_URL"),
        JWT_SECRET=os.environ.get("JWT_SECRET", "dev-secret-change-me"),
        JWT_EXPIRES_HOURS=int(os.environ.get("JWT_EXPIRES_HOURS", "24")),
        CORS_ORIGINS=os.environ.get("CORS_ORIGINS", "*"),
        SEED_DEFAULT_USERS=_env_flag("SEED_DEFAULT_USERS", True),
        LOG_LEVEL=os.environ.get("LOG_LEVEL", "INFO"),
    )
    if test_config:
        app.config.update(test_config)

    # ---- Logging ----
    level = getattr(logging, str(app.config["LOG_LEVEL"]).upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("portfolio").setLevel(level)
    app.logger.setLevel(level)

    # ---- Database ----
    dsn = app.config["DATABASE_URL"]
    if not dsn:
        raise RuntimeError("DATABASE_URL is not set. Put it in your .env")
    engine = make_engine(dsn)
    init_db(engine)
    app.config["DB_ENGINE"] = engine
    app.config["SESSION_FACTORY"] = make_session_factory(engine)

    CORS(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})

    # ---- Bootstrap ----
    if app.config["SEED_DEFAULT_USERS"]:
        from .services.seed_users import seed_default_users
        seed_default_users(app.config["SESSION_FACTORY"])

    # ---- Per-request session management ----
    @app.teardown_appcontext
    def _close_request_session(exc):
        session = g.pop("_db_session", None)
        if session is not None:
            if exc is not None:
                session.rollback()
            session.close()

    # ---- Blueprints ----
    from .routes import register_error_handlers
    from .routes.auth import auth_bp
    from .routes.projects import projects_bp

    app.register_blueprint(auth_bp, url_prefix="/api")
    app.register_blueprint(projects_bp, url_prefix="/api")
    register_error_handlers(app)

    @app.get("/api/healthz")
    def health():
        return jsonify(ok=True)

    app.logger.info("Portfolio API initialised")
    return app


def get_session() -> Session:
    """One session per request, closed on app-context teardown."""
    if "_db_session" not in g:
        g._db_session = current_app.config["SESSION_FACTORY"]()
    return g._db_session
