from marshmallow import Schema, fields, validate


class RoleCreateSchema(Schema):
    name = fields.String(required=True, validate=validate.Length(min=1, max=255))


class RoleDeleteSchema(Schema):
    role_id = fields.String(required=True, data_key="roleId", validate=validate.Length(min=1))


class RoleOutSchema(Schema):
    id = fields.String()
    name = fields.String()
