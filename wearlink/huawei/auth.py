"""Authentication flow selection and parsing of auth-related replies."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from wearlink.huawei.tlv import Tlv


class AuthFlow(Enum):
    NORMAL = "normal"
    HICHAIN_LITE = "hichain_lite"
    HICHAIN = "hichain"


@dataclass(frozen=True)
class BondParams:
    encryption_counter: int


@dataclass(frozen=True)
class SecurityNegotiation:
    auth_type: int


def select_auth_flow(device_support_type: int) -> AuthFlow:
    """Choose the authentication flow the device's support type calls for."""
    if device_support_type == 0x02:
        return AuthFlow.HICHAIN_LITE
    if device_support_type in (0x01, 0x03, 0x04):
        return AuthFlow.HICHAIN
    return AuthFlow.NORMAL


def parse_security_negotiation(tlv: Tlv) -> SecurityNegotiation:
    """Auth type from tag 0x02, else tag 0x7f, else 0."""
    auth_type = tlv.get_u8(0x02)
    if auth_type is None:
        auth_type = tlv.get_u8(0x7F)
    return SecurityNegotiation(auth_type if auth_type is not None else 0)


def parse_bond_params(tlv: Tlv) -> BondParams:
    """Encryption counter from tag 0x09, defaulting to 0."""
    counter = tlv.get_u32(0x09)
    return BondParams(counter if counter is not None else 0)