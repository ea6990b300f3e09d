from __future__ import annotations
from typing import Tuple, Union
from numpy import ndarray

ARGBTuple = Tuple[int, int, int, int]
UnitTriple = Tuple[float, float, float]
ChannelArray = Union[ndarray, int]
UnitArray = Union[ndarray, float]
