"""Controlled vocabulary identities: the vocabulary enumeration and :class:`CURIE`."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..exceptions import CURIEParseError


class ControlledVocabulary(Enum):
    """Ontologies a term identifier can belong to.

    ``UNKNOWN`` absorbs every prefix not listed here so that files written
    against newer vocabularies still load.
    """

    MS = "MS"
    UO = "UO"
    EFO = "EFO"
    OBI = "OBI"
    HANCESTRO = "HANCESTRO"
    BFO = "BFO"
    NCIT = "NCIT"
    BTO = "BTO"
    PRIDE = "PRIDE"
    UNKNOWN = "?"

    def prefix(self) -> str:
        return self.value

    @classmethod
    def from_prefix(cls, prefix: Optional[str]) -> "ControlledVocabulary":
        """Map a vocabulary tag such as ``"MS"`` or ``"PSI-MS"`` to its member."""
        if not prefix:
            return cls.UNKNOWN
        tag = prefix.strip().upper()
        if tag == "PSI-MS":
            tag = "MS"
        for member in cls:
            if member.value == tag:
                return member
        logging.debug(f"Unrecognized controlled vocabulary prefix {prefix!r}")
        return cls.UNKNOWN


@dataclass(frozen=True)
class CURIE:
    """A term identifier: vocabulary plus integer accession number."""
    controlled_vocabulary: ControlledVocabulary
    accession: int

    @classmethod
    def parse(cls, text: str) -> "CURIE":
        """Parse ``"MS:1000511"`` style text.

        Raises:
            CURIEParseError: If the text has no ``:`` separator or the accession
                is not an integer.
        """
        prefix, sep, accession = str(text).partition(":")
        if not sep:
            raise CURIEParseError(f"Missing ':' in term identifier {text!r}")
        try:
            number = int(accession)
        except ValueError:
            raise CURIEParseError(f"Accession of {text!r} is not an integer") from None
        return cls(ControlledVocabulary.from_prefix(prefix), number)

    @classmethod
    def coerce(cls, value) -> "CURIE":
        if isinstance(value, CURIE):
            return value
        return cls.parse(value)

    def as_param(self):
        """Build a valueless :class:`~mzaccess.params.param.Param` for this term."""
        from .param import Param
        from .terms import term_name

        return Param.from_raw(term_name(self) or "", None, curie=self)

    def __str__(self) -> str:
        return f"{self.controlled_vocabulary.prefix()}:{self.accession:07d}"
