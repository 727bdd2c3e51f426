"""Registry of known StatsWales input files.

This module lists the areas table and every importable dataset,
with the column mapping each parser needs.
"""

from __future__ import annotations

from core.errors import BethYwInvalidArgumentError
from core.types import InputFileSource, SourceColumn, SourceDataType

AREAS = InputFileSource(
    name="Areas",
    code="areas",
    file="areas.csv",
    parser=SourceDataType.AUTHORITY_CODE_CSV,
    cols={
        SourceColumn.AUTH_CODE: "Local authority code",
        SourceColumn.AUTH_NAME_ENG: "Name (eng)",
        SourceColumn.AUTH_NAME_CYM: "Name (cym)",
    },
)

POPDEN = InputFileSource(
    name="Population density",
    code="popden",
    file="popu1009.json",
    parser=SourceDataType.STATS_JSON,
    cols={
        SourceColumn.AUTH_CODE: "Localauthority_Code",
        SourceColumn.AUTH_NAME_ENG: "Localauthority_ItemName_ENG",
        SourceColumn.MEASURE_CODE: "Measure_Code",
        SourceColumn.MEASURE_NAME: "Measure_ItemName_ENG",
        SourceColumn.YEAR: "Year_Code",
        SourceColumn.VALUE: "Data",
    },
)

BIZ = InputFileSource(
    name="Active Businesses",
    code="biz",
    file="econ0080.json",
    parser=SourceDataType.STATS_JSON,
    cols={
        SourceColumn.AUTH_CODE: "Area_Code",
        SourceColumn.AUTH_NAME_ENG: "Area_ItemName_ENG",
        SourceColumn.MEASURE_CODE: "Variable_Code",
        SourceColumn.MEASURE_NAME: "Variable_ItemName_ENG",
        SourceColumn.YEAR: "Year_Code",
        SourceColumn.VALUE: "Data",
    },
)

AQI = InputFileSource(
    name="Air Quality Indicators",
    code="aqi",
    file="envi0201.json",
    parser=SourceDataType.STATS_JSON,
    cols={
        SourceColumn.AUTH_CODE: "Area_Code",
        SourceColumn.AUTH_NAME_ENG: "Area_ItemName_ENG",
        SourceColumn.MEASURE_CODE: "Pollutant_ItemName_ENG",
        SourceColumn.MEASURE_NAME: "Pollutant_ItemName_ENG",
        SourceColumn.YEAR: "Year_Code",
        SourceColumn.VALUE: "Data",
    },
)

TRAINS = InputFileSource(
    name="Rail passenger journeys",
    code="trains",
    file="tran0152.json",
    parser=SourceDataType.STATS_JSON,
    cols={
        SourceColumn.AUTH_CODE: "LocalAuthority_Code",
        SourceColumn.AUTH_NAME_ENG: "LocalAuthority_ItemName_ENG",
        SourceColumn.SINGLE_MEASURE_CODE: "rail",
        SourceColumn.SINGLE_MEASURE_NAME: "Rail passenger journeys",
        SourceColumn.YEAR: "Year_Code",
        SourceColumn.VALUE: "Data",
    },
)

COMPLETE_POPDEN = InputFileSource(
    name="Population density",
    code="complete-popden",
    file="complete-popu1009-popden.csv",
    parser=SourceDataType.AUTHORITY_BY_YEAR_CSV,
    cols={
        SourceColumn.AUTH_CODE: "AuthorityCode",
        SourceColumn.SINGLE_MEASURE_CODE: "dens",
        SourceColumn.SINGLE_MEASURE_NAME: "Population density",
    },
)

COMPLETE_POP = InputFileSource(
    name="Population",
    code="complete-pop",
    file="complete-popu1009-pop.csv",
    parser=SourceDataType.AUTHORITY_BY_YEAR_CSV,
    cols={
        SourceColumn.AUTH_CODE: "AuthorityCode",
        SourceColumn.SINGLE_MEASURE_CODE: "pop",
        SourceColumn.SINGLE_MEASURE_NAME: "Population",
    },
)

COMPLETE_AREA = InputFileSource(
    name="Land area",
    code="complete-area",
    file="complete-popu1009-area.csv",
    parser=SourceDataType.AUTHORITY_BY_YEAR_CSV,
    cols={
        SourceColumn.AUTH_CODE: "AuthorityCode",
        SourceColumn.SINGLE_MEASURE_CODE: "area",
        SourceColumn.SINGLE_MEASURE_NAME: "Land area",
    },
)

DATASETS: tuple[InputFileSource, ...] = (
    POPDEN,
    BIZ,
    AQI,
    TRAINS,
    COMPLETE_POPDEN,
    COMPLETE_POP,
    COMPLETE_AREA,
)


def supported_dataset_codes() -> tuple[str, ...]:
    """Return registered dataset codes in registry order."""
    return tuple(dataset.code for dataset in DATASETS)


def find_dataset(code: str) -> InputFileSource:
    """Look up a registered dataset by its code.

    Args:
        code: Dataset code, matched case-insensitively.

    Returns:
        The registered dataset source.

    Raises:
        BethYwInvalidArgumentError: If no dataset has the code.
    """
    normalized = code.lower()
    for dataset in DATASETS:
        if dataset.code == normalized:
            return dataset
    raise BethYwInvalidArgumentError(f"No dataset matches key: {code}")
