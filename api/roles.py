from __future__ import annotations

import logging

from flask import Blueprint, request, jsonify

from models import storage
from models.role import Role
from models.schemas.role import RoleCreateSchema, RoleDeleteSchema, RoleOutSchema
from services.auth_service import load_payload
from services.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

bp = Blueprint("roles", __name__)

role_create_schema = RoleCreateSchema()
role_delete_schema = RoleDeleteSchema()
role_out_schema = RoleOutSchema()
roles_out_schema = RoleOutSchema(many=True)


@bp.post("/create/role")
def create_role():
    """
    Create a new role.
    Body: { "name": "Admin" }
    """
    data = load_payload(role_create_schema, request.get_json(silent=True))

    session = storage.get_session()
    if session.query(Role).filter(Role.name == data["name"]).first():
        raise ValidationError("Role already exists")

    role = Role(name=data["name"])
    storage.new(role)
    storage.save()
    logger.info("Role %s created", role.id)

    return jsonify(
        {
            "status": "success",
            "data": {"role": role_out_schema.dump(role)},
        }
    ), 201


@bp.get("/get/roles")
def get_roles():
    """List all roles; 404 when there are none."""
    session = storage.get_session()
    rows = session.query(Role).order_by(Role.name.asc()).all()
    if not rows:
        raise NotFoundError("No roles found")
    return jsonify(
        {
            "status": "success",
            "data": {"roles": roles_out_schema.dump(rows)},
        }
    ), 200


@bp.delete("/delete/role")
def delete_role():
    """
    Delete a role by id.
    Body: { "roleId": "<uuid>" }
    """
    data = load_payload(role_delete_schema, request.get_json(silent=True))

    role = storage.get(Role, data["role_id"])
    if not role:
        raise NotFoundError("Role not found")

    storage.delete(role)
    storage.save()
    logger.info("Role %s deleted", data["role_id"])
    return jsonify(
        {
            "status": "success",
            "message": "Role deleted successfully",
        }
    ), 200
