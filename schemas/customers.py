from pydantic import BaseModel, Field
from typing import Optional


class CustomerResponse(BaseModel):
    cust_code: str = Field(..., alias="CUST_CODE")
    cust_name: str = Field(..., alias="CUST_NAME")
    cust_city: Optional[str] = Field(None, alias="CUST_CITY")
    working_area: str = Field(..., alias="WORKING_AREA")
    cust_country: str = Field(..., alias="CUST_COUNTRY")
    grade: Optional[int] = Field(None, alias="GRADE")
    opening_amt: float = Field(..., alias="OPENING_AMT")
    receive_amt: float = Field(..., alias="RECEIVE_AMT")
    payment_amt: float = Field(..., alias="PAYMENT_AMT")
    outstanding_amt: float = Field(..., alias="OUTSTANDING_AMT")
    phone_no: str = Field(..., alias="PHONE_NO")
    agent_code: Optional[str] = Field(None, alias="AGENT_CODE")

    class Config:
        from_attributes = True
        populate_by_name = True
