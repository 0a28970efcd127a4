from marshmallow import Schema, fields, validate

# Hyphenated UUID, either case; stored exactly as sent
UUID_PATTERN = r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"


class UserCreateSchema(Schema):
    username = fields.String(required=True, validate=validate.Length(min=3, max=30))
    email = fields.Email(required=True)
    password = fields.String(required=True, load_only=True, validate=validate.Length(min=6))
    role_id = fields.String(
        required=True,
        data_key="roleId",
        validate=validate.Regexp(UUID_PATTERN, error="Not a valid UUID."),
    )


class UserLoginSchema(Schema):
    email = fields.Email(required=True)
    password = fields.String(required=True, load_only=True, validate=validate.Length(min=1))


class RefreshTokenSchema(Schema):
    token = fields.String(required=True, validate=validate.Length(min=1))


class UserOutSchema(Schema):
    id = fields.String()
    username = fields.String()
    email = fields.String()
    role_id = fields.String(data_key="roleId")
