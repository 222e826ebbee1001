"""Reference values and dictionaries

No functional code found within this module, just a bunch of statics

.. data:: PROFILE_UNITS

    A dictionary mapping the upper air profile column tags to the units the
    values are provided in, ``None`` for unitless values.

.. data:: SURFACE_UNITS

    A dictionary mapping the recognized surface table column tags to the
    units the values are provided in.

"""

# Value used by BUFKIT files to denote missing data
MISSING_VALUE = -9999.0

# The surface table header always starts with this, delimits the two sections
SURFACE_MARKER = "STN YYMMDD/HHMM"

# Station info preamble keys, in the order they appear
STATION_ID_KEY = "STID"
STATION_NUM_KEY = "STNM"

# Stability index keys, in the order they appear, with their attribute
INDEX_ATTRS = {
    "SHOW": "show",  # Showalter Index
    "LIFT": "li",  # Lifted Index
    "SWET": "swet",  # SWEAT Index
    "KINX": "kinx",  # K Index
    "LCLP": "lclp",  # Pressure at the LCL (hPa)
    "PWAT": "pwat",  # Precipitable water (mm)
    "TOTL": "totl",  # Total Totals Index
    "CAPE": "cape",  # Convective Available Potential Energy
    "LCLT": "lclt",  # Temperature at the LCL (K)
    "CINS": "cins",  # Convective Inhibition
    "EQLV": "eqlv",  # Equilibrium level (hPa)
    "LFCT": "lfc",  # Level of free convection (hPa)
    "BRCH": "brch",  # Bulk Richardson number
}
INDEX_UNITS = {
    "SHOW": "delta_degC",
    "LIFT": "delta_degC",
    "SWET": None,
    "KINX": "degC",
    "LCLP": "hPa",
    "PWAT": "mm",
    "TOTL": None,
    "CAPE": "J/kg",
    "LCLT": "K",
    "CINS": "J/kg",
    "EQLV": "hPa",
    "LFCT": "hPa",
    "BRCH": None,
}

# Closed vocabulary of the upper air profile table
PROFILE_UNITS = {
    "PRES": "hPa",  # Pressure
    "TMPC": "degC",  # Temperature
    "TMWC": "degC",  # Wet bulb temperature
    "DWPC": "degC",  # Dew point
    "THTE": "K",  # Equivalent potential temperature
    "DRCT": None,  # Wind direction (degrees), kept as a plain float
    "SKNT": "knot",  # Wind speed
    "OMEG": "Pa/s",  # Pressure vertical velocity
    "CFRL": None,  # Cloud fraction
    "HGHT": "m",  # Height above MSL
}

# Surface table columns with special handling
SFC_STATION = "STN"
SFC_VALID = "YYMMDD/HHMM"
SFC_IGNORE = "IGNORE"

# Recognized surface table columns, more exist in the wild
SURFACE_UNITS = {
    "PMSL": "hPa",  # Mean sea level pressure
    "PRES": "hPa",  # Station pressure
    "SKTC": "degC",  # Skin temperature
    "STC1": "K",  # Layer 1 soil temperature
    "STC2": "K",  # Layer 2 soil temperature
    "SNFL": "kg/m^2",  # 1-hour accumulated snowfall
    "WTNS": "percent",  # Soil moisture availability
    "P01M": "mm",  # 1-hour total precipitation
    "C01M": "mm",  # 1-hour convective precipitation
    "P03M": "mm",  # 3-hour total precipitation
    "C03M": "mm",  # 3-hour convective precipitation
    "LCLD": "percent",  # Low cloud coverage
    "MCLD": "percent",  # Middle cloud coverage
    "HCLD": "percent",  # High cloud coverage
    "SNRA": "percent",  # Snow ratio from explicit cloud scheme
    "UWND": "m/s",  # 10-meter U wind component
    "VWND": "m/s",  # 10-meter V wind component
    "T2MS": "degC",  # 2-meter temperature
    "Q2MS": "g/kg",  # 2-meter specific humidity
    "TD2M": "degC",  # 2-meter dew point
    "WXTS": None,  # Snow precipitation type (1=Snow)
    "WXTP": None,  # Ice pellets precipitation type (1=Ice pellets)
    "WXTZ": None,  # Freezing rain precipitation type (1=Freezing rain)
    "WXTR": None,  # Rain precipitation type (1=Rain)
    "USTM": "m/s",  # U-component of storm motion
    "VSTM": "m/s",  # V-component of storm motion
    "HLCY": "m^2/s^2",  # Storm relative helicity
    "WSYM": None,  # Weather type symbol number
    "VSBK": "km",  # Visibility
    "CDBP": "hPa",  # Pressure at the base of cloud
}

# Surface column tag to SurfaceRecord attribute, vector parts handled apart
SURFACE_ATTRS = {
    "PMSL": "mslp",
    "PRES": "station_pres",
    "SKTC": "skin_temp",
    "STC1": "lyr_1_soil_temp",
    "STC2": "lyr_2_soil_temp",
    "SNFL": "snow_1hr",
    "WTNS": "soil_moisture",
    "P01M": "p01",
    "C01M": "c01",
    "P03M": "p03",
    "C03M": "c03",
    "LCLD": "low_cloud",
    "MCLD": "mid_cloud",
    "HCLD": "hi_cloud",
    "SNRA": "snow_ratio",
    "T2MS": "temperature",
    "Q2MS": "spec_humidity",
    "TD2M": "dewpoint",
    "HLCY": "srh",
    "WSYM": "wx_sym_cod",
    "VSBK": "visibility",
    "CDBP": "cloud_base_pres",
}
SURFACE_FLAGS = {
    "WXTS": "snow_type",
    "WXTP": "ice_pellets_type",
    "WXTZ": "fzra_type",
    "WXTR": "rain_type",
}

# Names used for the flat mapping of auxiliary values on merged soundings
INDEX_ANAL_NAMES = {
    "show": "Showalter",
    "swet": "SWeT",
    "kinx": "K",
    "li": "LI",
    "lclp": "LCL",
    "pwat": "PWAT",
    "totl": "TotalTotals",
    "cape": "CAPE",
    "cins": "CIN",
    "lclt": "LCLTemperature",
    "eqlv": "EquilibriumLevel",
    "lfc": "LFC",
    "brch": "BulkRichardsonNumber",
}
SURFACE_ANAL_NAMES = {
    "skin_temp": "SkinTemperature",
    "lyr_1_soil_temp": "Layer1SoilTemp",
    "lyr_2_soil_temp": "Layer2SoilTemp",
    "snow_1hr": "SnowFall1HourKgPerMeterSquared",
    "p01": "Precipitation1HrMm",
    "c01": "ConvectivePrecip1HrMm",
    "p03": "Precipitation3HrMm",
    "c03": "ConvectivePrecip3HrMm",
    "snow_ratio": "SnowRatio",
    "visibility": "VisibilityKm",
    "srh": "StormRelativeHelicity",
    "wx_sym_cod": "WxSymbolCode",
}
SURFACE_FLAG_ANAL_NAMES = {
    "snow_type": "PrecipTypeSnow",
    "rain_type": "PrecipTypeRain",
    "fzra_type": "PrecipTypeFreezingRain",
    "ice_pellets_type": "PrecipTypeIcePellets",
}
