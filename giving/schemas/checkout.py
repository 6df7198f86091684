from pydantic import BaseModel, ConfigDict, Field, StrictInt


class CreateCheckoutRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Пустые значения проверяются в обработчике, чтобы вернуть 400 вместо 422
    donation_type: str | None = Field(default=None, alias="type", description="tithe, offering or haggai")
    # StrictInt: true и "5000" не превращаются в число
    amount: StrictInt | None = Field(default=None, description="Amount in minor units, e.g. pence")
    currency: str | None = Field(default=None, description="ISO 4217 code; defaults to gbp")


class CreateCheckoutResponse(BaseModel):
    url: str
