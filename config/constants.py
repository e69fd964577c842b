"""
Global constants for ClimateLoad.
"""

# Stefan-Boltzmann constant (W/m²K⁴), used as a scaling constant by the
# surface-temperature proxy model
STEFAN_BOLTZMANN = 5.67e-8

# Greedy clustering radius in degrees (~11 km)
CLUSTER_THRESHOLD_DEG = 0.1

# Minimum pause between two provider requests (seconds)
REQUEST_DELAY_S = 0.1

NASA_POWER_URL = "https://power.larc.nasa.gov/api/temporal/daily/point"
NASA_POWER_COMMUNITY = "RE"
NASA_POWER_PARAMETERS = [
    "T2M",                # Temperature at 2 m
    "T2M_MAX",            # Maximum temperature at 2 m
    "T2M_MIN",            # Minimum temperature at 2 m
    "RH2M",               # Relative humidity at 2 m
    "ALLSKY_SFC_SW_DWN",  # All-sky surface shortwave downward irradiance
    "ALLSKY_SFC_UVA",     # All-sky surface UVA irradiance
    "ALLSKY_SFC_UVB",     # All-sky surface UVB irradiance
    "WS2M",               # Wind speed at 2 m
    "PRECTOTCORR",        # Precipitation corrected
]
# POWER marks missing daily values with -999
NASA_POWER_FILL_VALUE = -999.0

# Point-local defaults for secondary parameters absent from a response
DEFAULT_MAX_TEMP_OFFSET = 5.0
DEFAULT_SOLAR_RADIATION = 200.0
DEFAULT_HUMIDITY = 50.0

MATERIAL_PRESETS = {
    "wood":     {"label": "Wood",     "albedo": 0.25, "emissivity": 0.90},
    "concrete": {"label": "Concrete", "albedo": 0.40, "emissivity": 0.95},
    "asphalt":  {"label": "Asphalt",  "albedo": 0.05, "emissivity": 0.95},
    "metal":    {"label": "Metal",    "albedo": 0.60, "emissivity": 0.20},
    "plastic":  {"label": "Plastic",  "albedo": 0.30, "emissivity": 0.85},
}

RISK_TIERS = ("Low", "Medium", "High")

# Surface temperature reaching the threshold enters the tier
CRACKING_THRESHOLDS_C = {"Medium": 40.0, "High": 60.0}
# EMC variation must exceed the threshold to enter the tier
MOISTURE_VARIATION_THRESHOLDS = {"Medium": 3.0, "High": 5.0}

SOURCE_PROVIDER = "provider"
SOURCE_SYNTHETIC = "synthetic"
