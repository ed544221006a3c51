from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, ValidationError, field_validator, model_validator

from configuquote.core.errors import InputValidationError

RetentionDays = Literal["30", "60", "90"]
OperatingModel = Literal["fully managed", "managed", "self-serve"]


class QuoteRequestInput(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    # strict: no bool->1.0 or "50"->50.0 coercion
    logsPerDayGb: float = Field(..., gt=0, allow_inf_nan=False, strict=True, description="The amount of logs per day in GB.")
    retentionDays: RetentionDays = Field(..., description="The data retention period in days.")
    dataAtRestEncryptionRequired: StrictBool = Field(..., description="Whether data-at-rest encryption is required.")
    operatingModel: OperatingModel = Field(..., description="The operating model.")

    @field_validator("retentionDays", mode="before")
    @classmethod
    def _retention_as_str(cls, v: Any) -> Any:
        # the form posts strings, API clients often send ints
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @classmethod
    def parse(cls, payload: Any) -> "QuoteRequestInput":
        try:
            return cls.model_validate(payload)
        except ValidationError as e:
            raise InputValidationError(_describe(e)) from e


def _describe(err: ValidationError) -> str:
    parts = []
    for item in err.errors():
        loc = ".".join(str(x) for x in item.get("loc", ())) or "input"
        parts.append(f"{loc}: {item.get('msg')}")
    return "Invalid quote request input - " + "; ".join(parts)


class QuoteRequestOutput(BaseModel):
    quoteRequest: str = Field(..., min_length=1, description="The generated request for quotation.")


# Response schema handed to the model; mirrors QuoteRequestOutput.
QUOTE_OUTPUT_SCHEMA = {
    "type": "object",
    "properties": {
        "quoteRequest": {
            "type": "string",
            "description": "The generated request for quotation.",
        },
    },
    "required": ["quoteRequest"],
}


class ActionResult(BaseModel):
    data: Optional[QuoteRequestOutput] = None
    error: Optional[str] = None
    status_code: int = Field(200, exclude=True)

    @model_validator(mode="after")
    def _exactly_one(self) -> "ActionResult":
        if (self.data is None) == (self.error is None):
            raise ValueError("ActionResult needs exactly one of data or error")
        return self
