"""
Configuration constants for mzaccess.

This module centralizes the magic numbers and default settings used by the
readers, the record decoders and the logging setup.
"""

# Physical constants
PROTON_MASS = 1.00727646677  # Da

# Signal array storage
MZ_DTYPE = "float64"
INTENSITY_DTYPE = "float32"
ION_MOBILITY_DTYPE = "float64"

# Format detection
FORMAT_SUFFIXES = {
    "mzml": (".mzml",),
    "mgf": (".mgf",),
}
COMPRESSED_SUFFIXES = (".gz",)
SNIFF_BYTES = 4096  # Bytes read from the start of a file when sniffing its format

# Logging
LOG_FILE_MAX_SIZE_MB = 10  # Max log file size before rotation
LOG_BACKUP_COUNT = 5
MB_TO_BYTES = 1024 * 1024

# Configuration classes
from dataclasses import dataclass
from typing import Optional


@dataclass
class ReaderConfig:
    """Configuration for opening a spectrum file"""
    format: Optional[str] = None  # None to detect from the path
    check_liveness: bool = True  # Fail loudly when a view outlives its record
    read_metadata: bool = True  # Parse run-level metadata on first request
    huge_tree: bool = False  # Allow very large XML text nodes (big binary arrays)

    def __post_init__(self):
        """Validate configuration after initialization"""
        if self.format is not None:
            self.format = self.format.lower()
            if self.format not in FORMAT_SUFFIXES:
                raise ValueError(f"Unsupported format: {self.format}")

    def get_summary(self) -> dict:
        """Get configuration summary for logging"""
        return {
            "format": self.format or "auto",
            "check_liveness": self.check_liveness,
            "read_metadata": self.read_metadata,
            "huge_tree": self.huge_tree,
        }
