"""
Admin blueprint: everything mounted under /admin requires a valid access token.

Any valid access token is enough; there is no role-based check here.
"""
from flask import Blueprint

from utils.auth_guard import authenticate_request

from .roles import bp as roles_bp

bp = Blueprint("admin", __name__, url_prefix="/admin")
bp.before_request(authenticate_request)

bp.register_blueprint(roles_bp, url_prefix="/api/v1")
