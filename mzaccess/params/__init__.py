from .cv import CURIE, ControlledVocabulary
from .described import ParamDescribed
from .param import Param, ValueType
from .units import Unit

__all__ = [
    'CURIE',
    'ControlledVocabulary',
    'Param',
    'ParamDescribed',
    'Unit',
    'ValueType',
]
