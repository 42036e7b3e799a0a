from datetime import date

from pydantic import BaseModel, Field


class OrderResponse(BaseModel):
    ord_num: int = Field(..., alias="ORD_NUM")
    ord_amount: float = Field(..., alias="ORD_AMOUNT")
    advance_amount: float = Field(..., alias="ADVANCE_AMOUNT")
    ord_date: date = Field(..., alias="ORD_DATE")
    cust_code: str = Field(..., alias="CUST_CODE")
    agent_code: str = Field(..., alias="AGENT_CODE")
    ord_description: str = Field(..., alias="ORD_DESCRIPTION")

    class Config:
        from_attributes = True
        populate_by_name = True
