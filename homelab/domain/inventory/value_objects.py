"""
Inventory Value Objects

Immutable descriptions of the hardware and software that make up a system.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SystemKind(str, Enum):
    """Form factor of a system."""

    LAPTOP = "laptop"
    LOW_POWERED_DEVICE = "low_powered_device"
    PC = "pc"
    TABLET = "tablet"


class SystemType(BaseModel):
    """Form factor plus the manufacturer that built the device."""

    model_config = ConfigDict(frozen=True)

    kind: SystemKind = Field(..., description="Device form factor")
    manufacturer: str = Field(..., min_length=1, description="Device manufacturer")

    @classmethod
    def laptop(cls, manufacturer: str) -> "SystemType":
        return cls(kind=SystemKind.LAPTOP, manufacturer=manufacturer)

    @classmethod
    def low_powered_device(cls, manufacturer: str) -> "SystemType":
        return cls(kind=SystemKind.LOW_POWERED_DEVICE, manufacturer=manufacturer)

    @classmethod
    def pc(cls, manufacturer: str) -> "SystemType":
        return cls(kind=SystemKind.PC, manufacturer=manufacturer)

    @classmethod
    def tablet(cls, manufacturer: str) -> "SystemType":
        return cls(kind=SystemKind.TABLET, manufacturer=manufacturer)


class CPUInfo(BaseModel):
    """Processor installed in a system."""

    model_config = ConfigDict(frozen=True)

    vendor: str = Field(..., min_length=1)
    model: str = Field(..., min_length=1)
    speed_in_ghz: float = Field(..., gt=0, description="Clock speed in GHz")


class OperatingSystem(BaseModel):
    """Operating system running on a system."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    family: str = Field(..., min_length=1, description="e.g. Linux, macOS, Windows")
    version: float = Field(..., ge=0)
