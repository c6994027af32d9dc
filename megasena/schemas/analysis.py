"""Schemas for frequency/delay analysis output."""

from __future__ import annotations

from marshmallow import Schema, fields


class NumberStatSchema(Schema):
    number = fields.Integer()
    count = fields.Integer()
    delay = fields.Integer()


class AnalysisSchema(Schema):
    stats = fields.List(fields.Nested(NumberStatSchema))
    total_draws = fields.Integer()
    average_frequency = fields.Integer()
