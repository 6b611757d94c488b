"""Physical constants shared by the electrochemistry calculators (CODATA 2018)."""

FARADAY_CONSTANT = 96485.33212  # C/mol
R_GAS = 8.314462618  # J/(mol·K)

ROOM_TEMPERATURE = 298.15  # K (25 °C)
ROOM_TEMPERATURE_TOLERANCE = 0.1  # K

# 2.303 * R * T / F at 298.15 K, rounded as in textbook tables
NERNST_SLOPE_25C = 0.0592  # V

STP_MOLAR_VOLUME = 22.413969545014137  # L/mol at 273.15 K, 101325 Pa
