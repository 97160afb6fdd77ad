"""Constants used across vehicle classes (speeds in km/h)."""

DEFAULT_SPEED = 0            # Speed of a stopped vehicle

# Top speeds
CAR_MAX_SPEED = 220
SPORT_MAX_SPEED = 300
CRUISER_MAX_SPEED = 180
STANDARD_MAX_SPEED = 220     # Any other motorcycle type

# Max reduction per brake() call
CAR_BRAKE_STEP = 20
BIKE_BRAKE_STEP = 25

# Acceleration multipliers
CAR_ACCEL_FACTOR = 1.0
BIKE_ACCEL_FACTOR = 1.5
