import logging
from pathlib import Path
from typing import Dict, List, Optional

from lxml import etree

from ..core.registry import open_binary
from ..exceptions import CURIEParseError
from ..params import CURIE, Param, Unit
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

_COMPONENT_KINDS = ("source", "analyzer", "detector")


def _local_name(element) -> str:
    return etree.QName(element).localname


def param_from_element(element) -> Param:
    """Build a :class:`Param` from a ``cvParam`` or ``userParam`` element."""
    curie = None
    accession = element.get("accession")
    if accession:
        try:
            curie = CURIE.parse(accession)
        except CURIEParseError:
            logging.debug(f"Ignoring malformed accession {accession!r}")
    unit = Unit.parse(element.get("unitAccession") or element.get("unitName"))
    return Param.from_raw(element.get("name", ""), element.get("value"), curie=curie, unit=unit)


class MzMLMetadataExtractor(BaseMetadataExtractor):
    """Extract run metadata from the mzML header WITHOUT parsing spectra"""

    def __init__(self, data_path: Path, huge_tree: bool = False):
        super().__init__(data_path)
        self.huge_tree = huge_tree
        self._groups: Dict[str, List[Param]] = {}

    def _params_of(self, element) -> List[Param]:
        params: List[Param] = []
        for child in element:
            if not isinstance(child.tag, str):
                continue
            name = _local_name(child)
            if name in ("cvParam", "userParam"):
                params.append(param_from_element(child))
            elif name == "referenceableParamGroupRef":
                params.extend(self._groups.get(child.get("ref"), ()))
        return params

    def _children(self, element, name: str):
        return [
            child for child in element.iter()
            if isinstance(child.tag, str) and _local_name(child) == name
        ]

    def _file_description(self, element) -> FileDescription:
        contents = self._children(element, "fileContent")
        source_files = [
            SourceFile(
                id=source.get("id", ""),
                name=source.get("name", ""),
                location=source.get("location", ""),
                params=self._params_of(source),
            )
            for source in self._children(element, "sourceFile")
        ]
        return FileDescription(
            contents=self._params_of(contents[0]) if contents else [],
            source_files=source_files,
        )

    def _instrument_configuration(self, element) -> InstrumentConfiguration:
        components = []
        for kind in _COMPONENT_KINDS:
            for component in self._children(element, kind):
                components.append(
                    Component(
                        kind=kind,
                        order=int(component.get("order", 0)),
                        params=self._params_of(component),
                    )
                )
        components.sort(key=lambda component: component.order)
        software_refs = self._children(element, "softwareRef")
        return InstrumentConfiguration(
            id=element.get("id", ""),
            components=components,
            software_reference=software_refs[0].get("ref") if software_refs else None,
            params=self._params_of(element),
        )

    def _data_processing(self, element) -> DataProcessing:
        methods = [
            ProcessingMethod(
                order=int(method.get("order", 0)),
                software_reference=method.get("softwareRef"),
                params=self._params_of(method),
            )
            for method in self._children(element, "processingMethod")
        ]
        return DataProcessing(id=element.get("id", ""), methods=methods)

    def extract_complete_metadata(self) -> RunMetadata:
        """Parse the header sections, stopping at the start of ``<run>``"""
        self._groups = {}
        fields = {
            "instrument_configurations": [],
            "softwares": [],
            "data_processings": [],
        }
        run_attributes: Optional[dict] = None

        with open_binary(self.data_path) as handle:
            context = etree.iterparse(handle, events=("start", "end"), huge_tree=self.huge_tree)
            for event, element in context:
                name = _local_name(element)
                if event == "start":
                    if name == "run":
                        run_attributes = dict(element.attrib)
                        break
                    continue

                if name == "referenceableParamGroup":
                    self._groups[element.get("id", "")] = self._params_of(element)
                elif name == "fileDescription":
                    fields["file_description"] = self._file_description(element)
                elif name == "instrumentConfiguration":
                    fields["instrument_configurations"].append(self._instrument_configuration(element))
                elif name == "software":
                    fields["softwares"].append(
                        Software(
                            id=element.get("id", ""),
                            version=element.get("version", ""),
                            params=self._params_of(element),
                        )
                    )
                elif name == "dataProcessing":
                    fields["data_processings"].append(self._data_processing(element))
            del context

        if run_attributes is None:
            logging.warning(f"No <run> element found in {self.data_path}")
            run_attributes = {}

        return RunMetadata(
            run_id=run_attributes.get("id"),
            default_instrument_configuration=run_attributes.get("defaultInstrumentConfigurationRef"),
            start_time_stamp=run_attributes.get("startTimeStamp"),
            **fields,
        )
