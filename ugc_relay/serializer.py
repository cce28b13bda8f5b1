from flask_marshmallow import Marshmallow
from marshmallow import EXCLUDE, fields, post_load, validate

ma = Marshmallow()

DEFAULT_SUBJECT = "New Request"
DEFAULT_MESSAGE = "No message provided"

BUDGET_OPTIONS = [
    "Not sure yet",
    "$500-$1,000",
    "$1,000-$2,500",
    "$2,500-$5,000",
    "$5,000+",
]


class InquiryRequestSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    subject = fields.String(allow_none=True)
    message = fields.String(allow_none=True)

    @post_load
    def apply_defaults(self, data, **kwargs):
        # Empty strings count as missing
        return {
            "subject": data.get("subject") or DEFAULT_SUBJECT,
            "message": data.get("message") or DEFAULT_MESSAGE,
        }


class QuoteRequestSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.String(required=True, validate=validate.Length(min=1))
    email = fields.Email(required=True)
    brand = fields.String(load_default="")
    budget = fields.String(load_default=BUDGET_OPTIONS[0], validate=validate.OneOf(BUDGET_OPTIONS))
    needs = fields.String(required=True, validate=validate.Length(min=1))


class CreatorRegistrationSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    firstName = fields.String(required=True, validate=validate.Length(min=1))
    lastName = fields.String(required=True, validate=validate.Length(min=1))
    email = fields.Email(required=True)
    country = fields.String(load_default="")
    dob = fields.String(load_default="")
    instagram = fields.String(load_default="")
    tiktok = fields.String(load_default="")
    links = fields.String(load_default="")
    permission = fields.Boolean(load_default=False)
    subscribe = fields.Boolean(load_default=False)
