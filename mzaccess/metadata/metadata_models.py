from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..params import Param


class _MetadataModel(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)


class SourceFile(_MetadataModel):
    """A file the run was converted from"""
    id: str
    name: str = ""
    location: str = ""
    params: List[Param] = Field(default_factory=list)


class FileDescription(_MetadataModel):
    """What the file contains and where it came from"""
    contents: List[Param] = Field(default_factory=list)
    source_files: List[SourceFile] = Field(default_factory=list)


class Component(_MetadataModel):
    """One instrument component"""
    kind: str  # "source", "analyzer" or "detector"
    order: int = 0
    params: List[Param] = Field(default_factory=list)


class InstrumentConfiguration(_MetadataModel):
    """An instrument setup that scans refer to by id"""
    id: str
    components: List[Component] = Field(default_factory=list)
    software_reference: Optional[str] = None
    params: List[Param] = Field(default_factory=list)


class Software(_MetadataModel):
    id: str
    version: str = ""
    params: List[Param] = Field(default_factory=list)


class ProcessingMethod(_MetadataModel):
    order: int = 0
    software_reference: Optional[str] = None
    params: List[Param] = Field(default_factory=list)


class DataProcessing(_MetadataModel):
    id: str
    methods: List[ProcessingMethod] = Field(default_factory=list)


class RunMetadata(_MetadataModel):
    """Complete run-level metadata"""
    run_id: Optional[str] = None
    default_instrument_configuration: Optional[str] = None
    start_time_stamp: Optional[str] = None
    file_description: FileDescription = Field(default_factory=FileDescription)
    instrument_configurations: List[InstrumentConfiguration] = Field(default_factory=list)
    softwares: List[Software] = Field(default_factory=list)
    data_processings: List[DataProcessing] = Field(default_factory=list)

    def get_instrument_configuration(self, configuration_id: str) -> Optional[InstrumentConfiguration]:
        for configuration in self.instrument_configurations:
            if configuration.id == configuration_id:
                return configuration
        return None
