from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class BrandVettingRequest(BaseModel):
    """Request body for the /brand-vetting endpoint.

    Only shape is enforced here.  Content rules (length, letters,
    fictitious names) are applied by the input validator so the API can
    report them with the pipeline's own error envelope.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "brandName": "Patagonia",
                "brandUrl": "https://www.patagonia.com",
            }
        },
    )

    brand_name: str = Field(
        ...,
        alias="brandName",
        max_length=200,
        description="Company or brand name to vet",
    )
    brand_url: Optional[str] = Field(
        default=None,
        alias="brandUrl",
        max_length=2000,
        description="Optional brand website, echoed back in the report",
    )
