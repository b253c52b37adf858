"""Host CPU architecture detection.

The resolved value is the key used to pick a Dockerfile out of a wedding
invite's ``build_files`` map.
"""

from __future__ import annotations

import logging
import platform
from enum import Enum

from wedding_planner.exceptions import UnsupportedArchitectureError

logger = logging.getLogger(__name__)


class CpuType(str, Enum):
    """CPU architectures supported as ``build_files`` keys."""

    X86 = "x86"
    X86_64 = "x86_64"
    ARM = "arm"
    AARCH64 = "aarch64"
    M68K = "m68k"
    MIPS = "mips"
    MIPS64 = "mips64"
    POWERPC = "powerpc"
    POWERPC64 = "powerpc64"
    RISCV64 = "riscv64"
    S390X = "s390x"
    SPARC64 = "sparc64"

    def __str__(self) -> str:
        return self.value


# platform.machine() spellings that differ from the manifest keys
_MACHINE_ALIASES: dict[str, CpuType] = {
    "amd64": CpuType.X86_64,
    "x64": CpuType.X86_64,
    "i386": CpuType.X86,
    "i486": CpuType.X86,
    "i586": CpuType.X86,
    "i686": CpuType.X86,
    "arm64": CpuType.AARCH64,
    "armv6l": CpuType.ARM,
    "armv7l": CpuType.ARM,
    "armv8l": CpuType.ARM,
    "mipsel": CpuType.MIPS,
    "mips64el": CpuType.MIPS64,
    "ppc": CpuType.POWERPC,
    "ppc64": CpuType.POWERPC64,
    "ppc64le": CpuType.POWERPC64,
}


def resolve_cpu_type(machine: str | None = None) -> CpuType:
    """Return the CPU type of the host (or of ``machine`` when given).

    Raises:
        UnsupportedArchitectureError: If the machine is not in the supported set.
    """
    raw = platform.machine() if machine is None else machine
    key = raw.strip().lower()

    if key in _MACHINE_ALIASES:
        return _MACHINE_ALIASES[key]
    try:
        return CpuType(key)
    except ValueError:
        logger.error("Unsupported CPU type: %s", raw)
        raise UnsupportedArchitectureError(raw) from None


__all__ = ["CpuType", "resolve_cpu_type"]
