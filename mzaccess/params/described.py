"""The shared "has parameters" capability."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Union

from .cv import CURIE
from .param import Param


class ParamDescribed(ABC):
    """Mixin for every entity that carries a parameter list.

    Implementers only provide :meth:`params`; lookup is implemented once here.
    Lookups never fail: a missing term is reported as ``None`` (or an empty list).
    """

    @abstractmethod
    def params(self) -> Sequence[Param]:
        """Return the parameter list, in file order."""
        pass

    def get_param_by_curie(self, curie: Union[CURIE, str]) -> Optional[Param]:
        """Return the first param whose term identity equals ``curie``.

        Args:
            curie: A :class:`CURIE` or its text form, e.g. ``"MS:1000285"``
        """
        query = CURIE.coerce(curie)
        for param in self.params():
            if param.curie() == query:
                return param
        return None

    def get_param_by_accession(self, accession: str) -> Optional[Param]:
        return self.get_param_by_curie(CURIE.parse(accession))

    def get_param_by_name(self, name: str) -> Optional[Param]:
        for param in self.params():
            if param.name == name:
                return param
        return None

    def params_by_curie(self, curie: Union[CURIE, str]) -> List[Param]:
        query = CURIE.coerce(curie)
        return [param for param in self.params() if param.curie() == query]
