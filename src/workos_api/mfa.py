"""WorkOS multi-factor authentication operations."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel

from ._params import path_segment
from .common import Timestamps
from .known_or_unknown import KnownOrUnknown

if TYPE_CHECKING:
    from .client import WorkOS


class FactorType(str, Enum):
    GENERIC_OTP = "generic_otp"
    SMS = "sms"
    TOTP = "totp"


class TotpDetails(BaseModel):
    issuer: Optional[str] = None
    user: Optional[str] = None
    qr_code: Optional[str] = None
    secret: Optional[str] = None
    uri: Optional[str] = None


class SmsDetails(BaseModel):
    phone_number: str


class AuthenticationFactor(Timestamps):
    """An enrolled second factor."""

    id: str
    type: KnownOrUnknown[FactorType]
    user_id: Optional[str] = None
    totp: Optional[TotpDetails] = None
    sms: Optional[SmsDetails] = None


class Mfa:
    def __init__(self, workos: WorkOS) -> None:
        self.workos = workos

    async def get_factor(self, authentication_factor_id: str) -> AuthenticationFactor:
        return await self.workos.call(
            "GET", f"/auth/factors/{path_segment(authentication_factor_id)}", AuthenticationFactor
        )

    async def delete_factor(self, authentication_factor_id: str) -> None:
        await self.workos.call("DELETE", f"/auth/factors/{path_segment(authentication_factor_id)}")
