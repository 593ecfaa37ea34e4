# Importing the backends registers them with the format registry
from .mgf_reader import MGFSource, decode_mgf_spectrum
from .mzml_decoder import decode_spectrum
from .mzml_reader import MzMLSource

__all__ = ["MGFSource", "MzMLSource", "decode_mgf_spectrum", "decode_spectrum"]
