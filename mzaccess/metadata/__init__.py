from .base_extractor import BaseMetadataExtractor
from .metadata_models import (
    Component,
    DataProcessing,
    FileDescription,
    InstrumentConfiguration,
    ProcessingMethod,
    RunMetadata,
    Software,
    SourceFile,
)
from .mzml_extractor import MzMLMetadataExtractor

__all__ = [
    "BaseMetadataExtractor",
    "Component",
    "DataProcessing",
    "FileDescription",
    "InstrumentConfiguration",
    "MzMLMetadataExtractor",
    "ProcessingMethod",
    "RunMetadata",
    "Software",
    "SourceFile",
]
