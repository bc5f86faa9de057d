"""
Sample Inventory

Hardcoded lab used by the CLI to exercise the cache round trip.
"""

from ipaddress import IPv4Address

from ...constants import DEFAULT_LAB_NAME
from .entities import HomeLab, System
from .value_objects import CPUInfo, OperatingSystem, SystemType


def build_sample_lab(name: str = DEFAULT_LAB_NAME) -> HomeLab:
    """Return a lab populated with four workstations."""
    lab = HomeLab(name=name)

    macos = OperatingSystem(name="Sonoma", family="macOS", version=14.5)

    lab.add_system(
        System(
            name="sais-air.lan",
            system_type=SystemType.laptop("Apple"),
            cpu_info=CPUInfo(vendor="Apple", model="M3", speed_in_ghz=4.5),
            ram_in_gb=24,
            os=macos,
            ip_address=IPv4Address("192.168.86.41"),
        )
    )
    lab.add_system(
        System(
            name="sais-mac-studio",
            system_type=SystemType.laptop("Apple"),
            cpu_info=CPUInfo(vendor="Apple", model="M1 Max", speed_in_ghz=4.5),
            ram_in_gb=32,
            os=macos,
            ip_address=IPv4Address("192.168.86.26"),
        )
    )
    lab.add_system(
        System(
            name="skrao-lin-ws",
            system_type=SystemType.laptop("LG"),
            cpu_info=CPUInfo(
                vendor="Intel",
                model="13th Gen Intel(R) Core(TM) i7-1360P",
                speed_in_ghz=2.0,
            ),
            ram_in_gb=32,
            os=OperatingSystem(name="Zorin OS", family="Linux", version=17.0),
            ip_address=IPv4Address("192.168.86.91"),
        )
    )
    lab.add_system(
        System(
            name="skrao-windows-11-pc",
            system_type=SystemType.laptop("Lenovo"),
            cpu_info=CPUInfo(
                vendor="Intel", model="11th gen intel i7-1160g7", speed_in_ghz=1.22
            ),
            ram_in_gb=16,
            os=OperatingSystem(name="Windows", family="Windows", version=11.0),
            ip_address=IPv4Address("192.168.86.51"),
        )
    )

    return lab
