"""Fixture files for end-to-end reader tests.

The mzML document is written at test time from known arrays so the expected
values live next to the assertions that use them.
"""

import base64
import gzip
import shutil
from pathlib import Path

import numpy as np
import pytest

DATA_DIR = Path(__file__).parent.parent / "data"

CID = ("MS:1000133", "collision-induced dissociation")
ETD = ("MS:1000598", "electron transfer dissociation")

SPECTRA = [
    {
        "id": "scan=1",
        "ms_level": 1,
        "start_time": ("0.5", "UO:0000031", "minute"),
        "mzs": [100.0, 200.0, 300.0],
        "intensities": [10.0, 20.0, 30.0],
    },
    {
        "id": "scan=2",
        "ms_level": 2,
        "start_time": ("90", "UO:0000010", "second"),
        "mzs": [50.0, 75.5],
        "intensities": [5.0, 7.5],
        "precursor": {"ref": "scan=1", "mz": 200.0, "charge": 2, "energy": 35.0},
    },
    {
        "id": "frame=3",
        "ms_level": 1,
        "start_time": ("2.0", "UO:0000031", "minute"),
        "mzs": [100.0, 110.0, 120.0, 130.0],
        "intensities": [1.0, 2.0, 3.0, 4.0],
        "ion_mobility": [0.8, 0.9, 0.8, 0.9],
    },
]


def _cv(accession, name, value="", unit=None):
    unit_attrs = ""
    if unit is not None:
        unit_accession, unit_name = unit
        unit_ref = unit_accession.split(":")[0]
        unit_attrs = f' unitCvRef="{unit_ref}" unitAccession="{unit_accession}" unitName="{unit_name}"'
    return f'<cvParam cvRef="MS" accession="{accession}" name="{name}" value="{value}"{unit_attrs}/>'


def _binary_array(values, dtype, precision_param, array_param):
    encoded = base64.b64encode(np.asarray(values, dtype=dtype).tobytes()).decode("ascii")
    return (
        f'<binaryDataArray encodedLength="{len(encoded)}">'
        f"{precision_param}"
        f'{_cv("MS:1000576", "no compression")}'
        f"{array_param}"
        f"<binary>{encoded}</binary>"
        f"</binaryDataArray>"
    )


def _spectrum_xml(index, spectrum):
    value, unit_accession, unit_name = spectrum["start_time"]
    parts = [
        f'<spectrum index="{index}" id="{spectrum["id"]}" defaultArrayLength="{len(spectrum["mzs"])}">',
        _cv("MS:1000511", "ms level", spectrum["ms_level"]),
        _cv("MS:1000130", "positive scan"),
        _cv("MS:1000127", "centroid spectrum"),
        '<scanList count="1">',
        _cv("MS:1000795", "no combination"),
        '<scan instrumentConfigurationRef="IC1">',
        _cv("MS:1000016", "scan start time", value, (unit_accession, unit_name)),
        _cv("MS:1000512", "filter string", "FTMS + c NSI Full ms"),
        _cv("MS:1000616", "preset scan configuration", "1"),
        '<scanWindowList count="1"><scanWindow>',
        _cv("MS:1000501", "scan window lower limit", "50", ("MS:1000040", "m/z")),
        _cv("MS:1000500", "scan window upper limit", "2000", ("MS:1000040", "m/z")),
        "</scanWindow></scanWindowList>",
        "</scan>",
        "</scanList>",
    ]

    precursor = spectrum.get("precursor")
    if precursor is not None:
        parts += [
            '<precursorList count="1">',
            f'<precursor spectrumRef="{precursor["ref"]}">',
            "<isolationWindow>",
            _cv("MS:1000827", "isolation window target m/z", precursor["mz"], ("MS:1000040", "m/z")),
            _cv("MS:1000828", "isolation window lower offset", "1.0", ("MS:1000040", "m/z")),
            _cv("MS:1000829", "isolation window upper offset", "1.0", ("MS:1000040", "m/z")),
            "</isolationWindow>",
            '<selectedIonList count="1"><selectedIon>',
            _cv("MS:1000744", "selected ion m/z", precursor["mz"], ("MS:1000040", "m/z")),
            _cv("MS:1000041", "charge state", precursor["charge"]),
            "</selectedIon></selectedIonList>",
            "<activation>",
            *[_cv(accession, name) for accession, name in precursor.get("methods", [CID])],
            _cv("MS:1000045", "collision energy", precursor["energy"], ("UO:0000266", "electronvolt")),
            "</activation>",
            "</precursor>",
            "</precursorList>",
        ]

    arrays = [
        _binary_array(
            spectrum["mzs"],
            "<f8",
            _cv("MS:1000523", "64-bit float"),
            _cv("MS:1000514", "m/z array", unit=("MS:1000040", "m/z")),
        ),
        _binary_array(
            spectrum["intensities"],
            "<f4",
            _cv("MS:1000521", "32-bit float"),
            _cv("MS:1000515", "intensity array", unit=("MS:1000131", "number of detector counts")),
        ),
    ]
    if "ion_mobility" in spectrum:
        arrays.append(
            _binary_array(
                spectrum["ion_mobility"],
                "<f8",
                _cv("MS:1000523", "64-bit float"),
                _cv(
                    "MS:1003006",
                    "mean inverse reduced ion mobility array",
                    unit=("MS:1002814", "volt-second per square centimeter"),
                ),
            )
        )
    parts.append(f'<binaryDataArrayList count="{len(arrays)}">')
    parts += arrays
    parts.append("</binaryDataArrayList>")
    parts.append("</spectrum>")
    return "\n".join(parts)


def build_mzml(spectra) -> str:
    body = "\n".join(_spectrum_xml(i, spectrum) for i, spectrum in enumerate(spectra))
    return f"""<?xml version="1.0" encoding="utf-8"?>
<mzML xmlns="http://psi.hupo.org/ms/mzml" xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" version="1.1.0" id="small">
  <cvList count="2">
    <cv id="MS" fullName="Proteomics Standards Initiative Mass Spectrometry Ontology" version="4.1.0" URI="https://raw.githubusercontent.com/HUPO-PSI/psi-ms-CV/master/psi-ms.obo"/>
    <cv id="UO" fullName="Unit Ontology" version="09:04:2014" URI="http://ontologies.berkeleybop.org/uo.obo"/>
  </cvList>
  <fileDescription>
    <fileContent>
      {_cv("MS:1000579", "MS1 spectrum")}
      {_cv("MS:1000580", "MSn spectrum")}
    </fileContent>
    <sourceFileList count="1">
      <sourceFile id="RAW1" name="small.raw" location="file:///data">
        {_cv("MS:1000768", "Thermo nativeID format")}
      </sourceFile>
    </sourceFileList>
  </fileDescription>
  <referenceableParamGroupList count="1">
    <referenceableParamGroup id="CommonInstrumentParams">
      {_cv("MS:1001742", "LTQ Orbitrap Velos")}
      {_cv("MS:1000529", "instrument serial number", "SN06061F")}
    </referenceableParamGroup>
  </referenceableParamGroupList>
  <softwareList count="1">
    <software id="pwiz" version="3.0.0">
      {_cv("MS:1000615", "ProteoWizard software")}
    </software>
  </softwareList>
  <instrumentConfigurationList count="1">
    <instrumentConfiguration id="IC1">
      <referenceableParamGroupRef ref="CommonInstrumentParams"/>
      <componentList count="3">
        <source order="1">{_cv("MS:1000073", "electrospray ionization")}</source>
        <analyzer order="2">{_cv("MS:1000484", "orbitrap")}</analyzer>
        <detector order="3">{_cv("MS:1000624", "inductive detector")}</detector>
      </componentList>
      <softwareRef ref="pwiz"/>
    </instrumentConfiguration>
  </instrumentConfigurationList>
  <dataProcessingList count="1">
    <dataProcessing id="pwiz_Reader_conversion">
      <processingMethod order="0" softwareRef="pwiz">
        {_cv("MS:1000544", "Conversion to mzML")}
      </processingMethod>
    </dataProcessing>
  </dataProcessingList>
  <run id="small_run" defaultInstrumentConfigurationRef="IC1" startTimeStamp="2024-03-01T10:00:00Z">
    <spectrumList count="{len(spectra)}" defaultDataProcessingRef="pwiz_Reader_conversion">
{body}
    </spectrumList>
  </run>
</mzML>
"""


@pytest.fixture
def mzml_path(tmp_path):
    """Three spectra: an MS1 scan, an MS2 scan with a precursor and an ion mobility frame."""
    path = tmp_path / "small.mzML"
    path.write_text(build_mzml(SPECTRA), encoding="utf-8")
    return path


@pytest.fixture
def mgf_path(tmp_path):
    """Copy of the static MGF peak list, which holds three spectra."""
    path = tmp_path / "small.mgf"
    shutil.copy(DATA_DIR / "small.mgf", path)
    return path


@pytest.fixture
def combined_activation_mzml_path(tmp_path):
    """One MS2 scan fragmented by ETD with supplemental CID."""
    spectrum = dict(SPECTRA[1], precursor=dict(SPECTRA[1]["precursor"], methods=[ETD, CID]))
    path = tmp_path / "ethcd.mzML"
    path.write_text(build_mzml([spectrum]), encoding="utf-8")
    return path


@pytest.fixture
def gzipped_mzml_path(tmp_path):
    path = tmp_path / "small.mzML.gz"
    with gzip.open(path, "wt", encoding="utf-8") as handle:
        handle.write(build_mzml(SPECTRA))
    return path


@pytest.fixture
def gzipped_mgf_path(tmp_path):
    path = tmp_path / "small.mgf.gz"
    with gzip.open(path, "wb") as handle:
        handle.write((DATA_DIR / "small.mgf").read_bytes())
    return path


@pytest.fixture
def untitled_mgf_path(tmp_path):
    """Two peak lists without TITLE lines, followed by a titled one."""
    path = tmp_path / "untitled.mgf"
    path.write_text(
        "BEGIN IONS\n"
        "PEPMASS=445.12\n"
        "CHARGE=2+\n"
        "110.07 50.0\n"
        "147.11 80.0\n"
        "END IONS\n"
        "\n"
        "BEGIN IONS\n"
        "PEPMASS=612.33\n"
        "CHARGE=3-\n"
        "175.12 100.0\n"
        "END IONS\n"
        "\n"
        "BEGIN IONS\n"
        "TITLE=named.3.3.2\n"
        "PEPMASS=501.77\n"
        "CHARGE=2+\n"
        "129.10 12.0\n"
        "256.13 48.0\n"
        "385.17 22.0\n"
        "END IONS\n",
        encoding="utf-8",
    )
    return path
