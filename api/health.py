from flask import Blueprint

bp = Blueprint("health", __name__)

API_VERSION = "1.0.0"


@bp.get("/health")
def health():
    """Health check"""
    return {"status": "ok", "version": API_VERSION}, 200
