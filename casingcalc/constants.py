"""
Physical and field-formula constants shared across the package.
"""

# Gravitational acceleration as rounded in the field formulas (m/s2)
G = 9.81

# Steel density (g/cm3); physical constant, not configurable
STEEL_DENSITY_SG = 7.85

# psi -> MPa factor used for grade yield strengths
PSI_TO_MPA = 0.006895

# Default number of steps for depth profiles (N steps -> N+1 points)
DEFAULT_PROFILE_STEPS = 10
