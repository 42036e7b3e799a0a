import math
import re
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, validator

_ALPHA_RE = re.compile(r"[A-Za-z]+")
# Optional leading +, then digits with single space/dash/dot separators
_PHONE_RE = re.compile(r"\+?\d(?:[ .-]?\d)+")
_FLOAT_RE = re.compile(r"[-+]?(?:\d+)?(?:\.\d*)?(?:[eE][-+]?\d+)?")
_HTML_ESCAPES = str.maketrans({
    "&": "&amp;",
    "\"": "&quot;",
    "'": "&#x27;",
    "<": "&lt;",
    ">": "&gt;",
    "/": "&#x2F;",
    "\\": "&#x5C;",
    "`": "&#96;",
})


def sanitize_text(value: str) -> str:
    """Trim and HTML-escape a text field after it has been validated."""
    return value.strip().translate(_HTML_ESCAPES)


def check_alpha(value: str, field_name: str) -> str:
    if not _ALPHA_RE.fullmatch(value):
        raise ValueError(f"{field_name} must contain only letters")
    return sanitize_text(value)


def parse_commission(value) -> Decimal:
    """Accept a JSON number or a float-parseable string."""
    if isinstance(value, bool) or value is None:
        raise ValueError("COMMISSION must be a number")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError("COMMISSION must be a number")
    if isinstance(value, (int, float, Decimal)):
        return Decimal(str(value))
    if isinstance(value, str):
        text = value.strip()
        if text in ("", ".", "+", "-") or not _FLOAT_RE.fullmatch(text):
            raise ValueError("COMMISSION must be a number")
        return Decimal(text)
    raise ValueError("COMMISSION must be a number")


def check_phone(value: str) -> str:
    text = value.strip()
    digits = re.sub(r"\D", "", text)
    if not _PHONE_RE.fullmatch(text) or not 7 <= len(digits) <= 15:
        raise ValueError("PHONE_NO must be a valid phone number")
    if text.startswith("+") and digits.startswith("0"):
        raise ValueError("PHONE_NO must be a valid phone number")
    return text


class AgentFields(BaseModel):
    agent_name: str = Field(..., alias="AGENT_NAME", description="Agent name, letters only")
    working_area: str = Field(..., alias="WORKING_AREA", description="Working area, letters only")
    commission: Decimal = Field(..., alias="COMMISSION", description="Commission rate")
    phone_no: str = Field(..., alias="PHONE_NO", description="Mobile phone number")
    country: Optional[str] = Field(None, alias="COUNTRY", description="Country, letters only")

    class Config:
        populate_by_name = True

    @validator('agent_name')
    def validate_agent_name(cls, v):
        return check_alpha(v, "AGENT_NAME")

    @validator('working_area')
    def validate_working_area(cls, v):
        return check_alpha(v, "WORKING_AREA")

    @validator('country')
    def validate_country(cls, v):
        # Only an absent COUNTRY is optional; an explicit null is invalid
        if v is None:
            raise ValueError("COUNTRY must contain only letters")
        return check_alpha(v, "COUNTRY")

    @validator('commission', pre=True)
    def validate_commission(cls, v):
        return parse_commission(v)

    @validator('phone_no')
    def validate_phone(cls, v):
        return check_phone(v)


class AgentCreate(AgentFields):
    agent_code: str = Field(..., alias="AGENT_CODE", min_length=1, description="Agent code")

    @validator('agent_code')
    def validate_agent_code(cls, v):
        return sanitize_text(v)


class AgentReplace(AgentFields):
    """Full field set for PUT; AGENT_CODE comes from the path and is not replaceable."""


class AgentCommissionUpdate(BaseModel):
    commission: Decimal = Field(..., alias="COMMISSION", description="New commission value")

    class Config:
        populate_by_name = True

    @validator('commission', pre=True)
    def validate_commission(cls, v):
        return parse_commission(v)


class AgentResponse(BaseModel):
    agent_code: str = Field(..., alias="AGENT_CODE")
    agent_name: str = Field(..., alias="AGENT_NAME")
    working_area: str = Field(..., alias="WORKING_AREA")
    commission: float = Field(..., alias="COMMISSION")
    phone_no: str = Field(..., alias="PHONE_NO")
    country: Optional[str] = Field(None, alias="COUNTRY")

    class Config:
        from_attributes = True
        populate_by_name = True
