"""Manufacturer tables for environmental and motion sensors: Bosch Sensortec, Sensirion."""

from ..types import ComponentType as T
from .engine import HandlerSpec, ReplacementRule, rule

# =============================================================================
# BOSCH SENSORTEC
# =============================================================================

BOSCH_FUNCTIONS: dict[str, str] = {
    "BME": "environmental",
    "BMP": "pressure",
    "BMI": "IMU",
    "BMA": "accelerometer",
    "BMM": "magnetometer",
    "BMG": "gyroscope",
    "BNO": "IMU",
    "BHI": "IMU",
}

_BOSCH = r"^(BME|BMP|BMI|BMA|BMM|BMG|BNO|BHI)[0-9]{3}"

BOSCH = HandlerSpec(
    manufacturer_id="bosch",
    patterns=(
        (T.SENSOR, _BOSCH),
        (T.SENSOR_BOSCH, _BOSCH),
    ),
    series=(
        rule(r"^(B[A-Z]{2}[0-9]{3})"),
    ),
    package=(
        rule(r"^(?:BME|BMP)", value="LGA-8"),
        rule(r"^(?:BMI|BMA|BMG|BMM)", value="LGA-14"),
        rule(r"^(?:BNO|BHI)", value="LGA-28"),
    ),
    attributes={
        # BME280 -> BME2xx
        "family": (rule(r"^(B[A-Z]{2}[0-9])[0-9]{2}", value=r"\1xx"),),
        "function": (rule(_BOSCH, table=BOSCH_FUNCTIONS),),
    },
    replacement=ReplacementRule(core=(rule(r"^(B[A-Z]{2}[0-9]{3})"),)),
)

# =============================================================================
# SENSIRION
# =============================================================================

SENSIRION_FUNCTIONS: dict[str, str] = {
    "SHT": "humidity",
    "SHTC": "humidity",
    "STS": "temperature",
    "SGP": "gas",
    "SCD": "CO2",
    "SPS": "particulate",
    "SDP": "differential pressure",
}

SENSIRION = HandlerSpec(
    manufacturer_id="sensirion",
    patterns=(
        (T.SENSOR, r"^SHT[0-9]"),
        (T.SENSOR, r"^SHTC[0-9]"),
        (T.SENSOR, r"^STS[0-9]"),
        (T.SENSOR, r"^SGP[0-9]"),
        (T.SENSOR, r"^SCD[0-9]"),
        (T.SENSOR, r"^SPS[0-9]"),
        (T.SENSOR, r"^SDP[0-9]"),
        (T.SENSOR_SENSIRION, r"^(SHTC?|STS|SGP|SCD|SPS|SDP)[0-9]"),
    ),
    series=(
        rule(r"^(SHTC[0-9]|SHT[0-9]{2}|STS[0-9]{2}|SGP[0-9]{2}|SCD[0-9]{2}|SPS[0-9]{2}|SDP[0-9]{1,3})"),
    ),
    package=(
        rule(r"-DIS", value="DFN-8"),
        rule(r"^SHTC", value="DFN-4"),
        rule(r"^SHT4[0-9]", value="DFN-4"),
    ),
    attributes={
        "family": (
            rule(r"^SHTC([0-9])", value=r"SHTC\1"),
            rule(r"^(SHT|STS|SGP|SCD|SPS)([0-9])[0-9]", value=r"\1\2x"),
            rule(r"^SDP([0-9])", value=r"SDP\1x"),
        ),
        "function": (rule(r"^(SHTC|SHT|STS|SGP|SCD|SPS|SDP)[0-9]", table=SENSIRION_FUNCTIONS),),
        # SHT31-DIS-B -> DIS-B
        "variant_code": (rule(r"^S[A-Z]{2,3}[0-9]+-([A-Z0-9]+(?:-[A-Z0-9]+)?)$"),),
    },
    replacement=ReplacementRule(core=(rule(r"^(S[A-Z]{2,3}[0-9]+)"),)),
)
