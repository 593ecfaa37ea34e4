from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict

from .metadata_models import RunMetadata


class BaseMetadataExtractor(ABC):
    """Abstract base class for run metadata extraction"""

    def __init__(self, data_path: Path):
        self.data_path = Path(data_path)

    @abstractmethod
    def extract_complete_metadata(self) -> RunMetadata:
        """Extract all run-level metadata WITHOUT reading spectra"""
        pass

    def extract_instrument_info(self) -> Dict[str, Any]:
        """Get a short summary of the instrument configurations"""
        metadata = self.extract_complete_metadata()
        return {
            "configurations": [configuration.id for configuration in metadata.instrument_configurations],
            "default": metadata.default_instrument_configuration,
        }
