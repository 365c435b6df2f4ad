from __future__ import annotations

from pydantic import Field

from .base import OdbModel, StatusEnvelope


class Territory(OdbModel):
    code: str = ""
    name: str = ""
    type: str = ""


class KoatuuRegions(StatusEnvelope):
    data: list[Territory] = []


class City(Territory):
    districts: list[Territory] = []


class KoatuuItems(OdbModel):
    region_district: list[Territory] = Field(default_factory=list, alias="region-district")
    city_and_district: list[Territory] = Field(default_factory=list, alias="city-and-district")
    city: list[City] = []


class KoatuuRegion(Territory):
    items: KoatuuItems = Field(default_factory=KoatuuItems)


class Koatuu(StatusEnvelope):
    data: KoatuuRegion = Field(default_factory=KoatuuRegion)
