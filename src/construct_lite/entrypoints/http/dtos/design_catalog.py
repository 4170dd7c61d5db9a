from pydantic import BaseModel, ConfigDict, Field


MONEY_PATTERN = r"^\d+(\.\d{1,2})?$"


class DesignResponseDTO(BaseModel):
    """Catalog entry, with loan offer fields when the design is financed."""

    id: str
    design_code: str
    name: str
    description: str
    price: str
    number_of_rooms: int
    square_meters: str
    category: str
    images: list[str]
    is_loan_offer: bool
    max_loan_term: int | None = None
    loan_term_type: str
    interest_rate: str | None = None
    interest_rate_type: str
    estimated_downpayment: str | None = None


class DesignSearchQueryDTO(BaseModel):
    """Query parameters for searching designs in the catalog."""

    category: str | None = Field(
        default=None,
        description="Filter by category (case-insensitive exact match)",
        examples=["residential"],
    )
    price_min: str | None = Field(
        default=None,
        description="Minimum price (inclusive, decimal as string)",
        examples=["1000000.00"],
        pattern=MONEY_PATTERN,
    )
    price_max: str | None = Field(
        default=None,
        description="Maximum price (inclusive, decimal as string)",
        examples=["3500000.00"],
        pattern=MONEY_PATTERN,
    )
    rooms_min: int | None = Field(
        default=None,
        description="Minimum number of rooms (inclusive)",
        examples=[2],
        ge=1,
    )
    loan_offer: bool | None = Field(
        default=None,
        description="Only designs offered (true) or not offered (false) on loan",
        examples=[True],
    )
    offset: int = Field(
        default=0,
        description="Number of results to skip",
        examples=[0],
        ge=0,
    )
    limit: int = Field(
        default=20,
        description="Maximum number of results to return",
        examples=[20],
        ge=1,
        le=200,
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "category": "residential",
                "price_min": "1000000.00",
                "price_max": "3500000.00",
                "rooms_min": 2,
                "loan_offer": True,
                "offset": 0,
                "limit": 20,
            }
        }
    )


class DesignSearchResponseDTO(BaseModel):
    designs: list[DesignResponseDTO]
    total: int
    offset: int
    limit: int
