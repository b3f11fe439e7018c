"""Device capabilities, product information and events reported by the band."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass
class SupportedServices:
    ids: set[int] = field(default_factory=set)

    def contains(self, service_id: int) -> bool:
        return service_id in self.ids

    def __contains__(self, service_id: object) -> bool:
        return service_id in self.ids


@dataclass
class SupportedCommands:
    by_service: dict[int, set[int]] = field(default_factory=dict)

    def supports(self, service_id: int, command_id: int) -> bool:
        return command_id in self.by_service.get(service_id, ())


@dataclass
class ExpandCapabilities:
    data: bytes = b""


@dataclass
class ProductInfo:
    hardware_version: str | None = None
    software_version: str | None = None
    serial_number: str | None = None
    product_model: str | None = None
    package_name: str | None = None
    device_name: str | None = None
    region_code: str | None = None
    ota_signature_length: int | None = None


@dataclass
class BatteryStatus:
    level: int | None = None
    component_levels: list[int] = field(default_factory=list)
    component_states: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class CapabilityBytes:
    data: bytes


@dataclass(frozen=True)
class RawEvent:
    service_id: int
    command_id: int
    payload: bytes


DeviceEvent = Union[BatteryStatus, ProductInfo, CapabilityBytes, RawEvent]