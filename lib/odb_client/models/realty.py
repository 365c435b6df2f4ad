from __future__ import annotations

from pydantic import Field

from .base import OdbModel, StatusEnvelope


class RealtyGroup(OdbModel):
    dc_group_type: str = Field(default="", alias="dcGroupType")
    name: str = ""
    id: str = ""
    link: str = ""


class RealtyData(OdbModel):
    count: str = ""
    report_result_id: str = Field(default="", alias="reportResultId")
    items: list[RealtyGroup] = []


class Realty(StatusEnvelope):
    data: RealtyData = Field(default_factory=RealtyData)


class RealtyObjectResult(OdbModel):
    result_id: str = Field(default="", alias="resultId")
    object_result_link: str = ""


class RealtyItem(StatusEnvelope):
    data: RealtyObjectResult = Field(default_factory=RealtyObjectResult)


class RealtyReport(StatusEnvelope):
    data: RealtyObjectResult = Field(default_factory=RealtyObjectResult)


class RealtyExtract(OdbModel):
    # raw JSON documents as returned by the property rights register
    realty: str = ""
    old_mortgage_json: str = Field(default="", alias="oldMortgageJson")
    old_limitation_json: str = Field(default="", alias="oldLimitationJson")
    old_realty: str = Field(default="", alias="oldRealty")
    all_adresses: str = Field(default="", alias="allAdresses")


class RealtyResultData(OdbModel):
    data: RealtyExtract = Field(default_factory=RealtyExtract)
    status: str = ""
    pdf_link: str = ""
    fixed: str = ""


class RealtyResult(StatusEnvelope):
    data: RealtyResultData = Field(default_factory=RealtyResultData)
