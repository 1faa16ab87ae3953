from datetime import datetime
from enum import StrEnum
from typing import Annotated

import pydantic

from aurapy.either import Left, Right


class Unit(StrEnum):
    CELSIUS = "C"
    FAHRENHEIT = "F"


class Sensor(pydantic.BaseModel):
    name: str
    unit: Unit


class Reading(pydantic.BaseModel):
    # Either a numeric sample or the raw text the sensor sent back
    sample: Left[float] | Right[str]
    # Left and Right of the same type, distinguished only by key
    taken_at: Left[datetime] | Right[datetime]
    source: Left[Sensor] | Right[None] = Right(None)


class Tagged(pydantic.BaseModel):
    tag: Left[int]


OneDecimal = Annotated[
    float,
    pydantic.PlainSerializer(lambda v: f"{v:.1f}", return_type=str),
]


class Display(pydantic.BaseModel):
    shown: Left[OneDecimal] | Right[str]
