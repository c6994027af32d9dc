"""Schemas for stored draw results."""

from __future__ import annotations

from marshmallow import Schema, ValidationError, fields, validate, validates

_number = fields.Integer(validate=validate.Range(min=1, max=60))


class DrawSchema(Schema):
    """Serialize a Draw."""

    contest_no = fields.Integer(attribute="id", required=True)
    date = fields.String(required=True)
    numbers = fields.List(fields.Integer(), required=True)


class DrawCreateSchema(Schema):
    """Validate a manually entered draw."""

    contest_no = fields.Integer(required=True, validate=validate.Range(min=1))
    date = fields.String(required=False, load_default="")
    numbers = fields.List(_number, required=True, validate=validate.Length(equal=6))

    @validates("numbers")
    def _validate_unique(self, value, **kwargs):  # type: ignore[no-untyped-def]
        if len(value) != len(set(value)):
            raise ValidationError("Numbers must be unique")
