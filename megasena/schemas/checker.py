"""Schemas for the bet checker API."""

from __future__ import annotations

from marshmallow import Schema, ValidationError, fields, validate, validates_schema

from megasena.services.matcher_service import prize_tier


class DrawCheckRequestSchema(Schema):
    numbers = fields.List(
        fields.Integer(validate=validate.Range(min=1, max=60)),
        required=False,
        load_default=None,
    )
    contest_no = fields.Integer(required=False, load_default=None, validate=validate.Range(min=1))

    @validates_schema
    def _validate_source(self, data, **kwargs):  # type: ignore[no-untyped-def]
        nums = data.get("numbers")
        if nums is None and data.get("contest_no") is None:
            raise ValidationError({"numbers": ["Provide numbers or contest_no"]})
        if nums is not None and (len(nums) != 6 or len(set(nums)) != 6):
            raise ValidationError({"numbers": ["Enter 6 unique numbers"]})


class BetCheckSchema(Schema):
    bet_index = fields.Integer()
    numbers = fields.List(fields.Integer())
    hits = fields.Integer()
    matched_numbers = fields.List(fields.Integer())
    prize = fields.String(allow_none=True)


class HistoricalMatchSchema(Schema):
    bet_index = fields.Integer()
    bet_numbers = fields.List(fields.Integer())
    draw_id = fields.Integer()
    draw_date = fields.String()
    draw_numbers = fields.List(fields.Integer())
    hits = fields.Integer()
    prize = fields.Function(lambda obj: prize_tier(obj.hits))
