"""Schemas for bet generation, closure and history APIs."""

from __future__ import annotations

from marshmallow import Schema, ValidationError, fields, validate, validates

_bet = fields.List(
    fields.Integer(validate=validate.Range(min=1, max=60)),
    validate=validate.Length(equal=6),
)


def _check_unique_bets(bets: list[list[int]]) -> None:
    bad_idx = [i + 1 for i, bet in enumerate(bets) if len(set(bet)) != len(bet)]
    if bad_idx:
        raise ValidationError(
            f"Each bet must be 6 unique numbers (bad items: {', '.join(str(i) for i in bad_idx)})"
        )


class GenerateRequestSchema(Schema):
    mode = fields.String(required=True, validate=validate.OneOf(["intelligent", "random"]))
    count = fields.Integer(required=False, load_default=5, validate=validate.Range(min=1))
    bet_price = fields.Decimal(required=False, load_default=None, places=2, validate=validate.Range(min=0))
    save = fields.Boolean(required=False, load_default=False)


class ClosureRequestSchema(Schema):
    numbers = fields.List(
        fields.Integer(validate=validate.Range(min=1, max=60)),
        required=True,
    )
    save = fields.Boolean(required=False, load_default=False)

    @validates("numbers")
    def _validate_unique(self, value, **kwargs):  # type: ignore[no-untyped-def]
        if len(value) != len(set(value)):
            raise ValidationError("Numbers must be unique")


class HistoryCreateSchema(Schema):
    mode = fields.String(required=True, validate=validate.OneOf(["intelligent", "random"]))
    bets = fields.List(_bet, required=True, validate=validate.Length(min=1, max=5000))
    total_cost = fields.Decimal(required=False, load_default=None, places=2, validate=validate.Range(min=0))

    @validates("bets")
    def _validate_bets(self, value, **kwargs):  # type: ignore[no-untyped-def]
        _check_unique_bets(value)


class GeneratedBetsSetSchema(Schema):
    """Serialize a GeneratedBetsSet."""

    id = fields.String()
    timestamp = fields.DateTime()
    mode = fields.Function(lambda obj: obj.mode.value)
    bets = fields.List(fields.List(fields.Integer()))
    total_cost = fields.Decimal(as_string=True, allow_none=True)
