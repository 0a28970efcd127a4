from flask import Flask
from flask_cors import CORS
from argon2 import PasswordHasher

from .config import get_config
from .errors import register_error_handlers
from models import storage  # DBStorage singleton (scoped_session)
from models.stores import RefreshTokenStore, UserStore
from services.auth_service import AuthService
from utils.security import TokenSigner


def build_auth_service(config) -> AuthService:
    """
    Wire the auth service from app config.
    Access and refresh tokens must not share a signing secret.
    """
    access_secret = config["JWT_ACCESS_TOKEN_SECRET_KEY"]
    refresh_secret = config["JWT_REFRESH_TOKEN_SECRET_KEY"]
    if access_secret == refresh_secret:
        raise RuntimeError("JWT_ACCESS_TOKEN_SECRET_KEY and JWT_REFRESH_TOKEN_SECRET_KEY must differ")

    algorithm = config.get("JWT_ALGORITHM", "HS256")
    hasher = PasswordHasher(
        time_cost=config["ARGON2_TIME_COST"],
        memory_cost=config["ARGON2_MEMORY_COST"],
    )
    return AuthService(
        users=UserStore(storage),
        refresh_tokens=RefreshTokenStore(storage),
        access_signer=TokenSigner(access_secret, config["ACCESS_TOKEN_EXPIRES"], algorithm),
        refresh_signer=TokenSigner(refresh_secret, config["REFRESH_TOKEN_EXPIRES"], algorithm),
        hasher=hasher,
    )


def create_app(config_name: str | None = None, **overrides) -> Flask:
    """
    Application factory: creates and configures the Flask app.
    Keyword overrides are applied on top of the selected config class.
    """
    app = Flask(__name__)

    # Load configuration (reads .env via get_config)
    app.config.from_object(get_config(config_name))
    app.config.update(overrides)

    # Cross-Origin Resource Sharing: enable for dev, configurable for prod
    CORS(app, resources={r"/*": {"origins": app.config.get("CORS_ORIGINS", "*")}})

    # Register global error handlers that return the uniform {status, message} envelope
    register_error_handlers(app)

    storage.reload(app.config["DATABASE_URL"])
    app.extensions["auth_service"] = build_auth_service(app.config)

    from .health import bp as health_bp
    from .auth import bp as auth_bp
    from .admin import bp as admin_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(admin_bp)

    # Ensure the DB session is removed at the end of each request/app context
    @app.teardown_appcontext
    def remove_session(exception=None):
        # This calls scoped_session.remove(), preventing connection leaks
        storage.close()

    @app.route("/")
    def root():
        return {
            "message": "Welcome to Book Club API",
            "health": "/health",
        }, 200

    return app
