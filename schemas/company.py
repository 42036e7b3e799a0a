from pydantic import BaseModel, Field
from typing import Optional

# Response schema
class CompanyResponse(BaseModel):
    company_id: str = Field(..., alias="COMPANY_ID")
    company_name: Optional[str] = Field(None, alias="COMPANY_NAME")
    company_city: Optional[str] = Field(None, alias="COMPANY_CITY")

    class Config:
        from_attributes = True
        populate_by_name = True
