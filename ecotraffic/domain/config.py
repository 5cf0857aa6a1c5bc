# Simulation Configuration
import os

# Service
HOST = os.getenv("ECOTRAFFIC_HOST", "0.0.0.0")
PORT = int(os.getenv("ECOTRAFFIC_PORT", "8001"))
LOG_LEVEL = os.getenv("ECOTRAFFIC_LOG_LEVEL", "INFO")

# Ticking
TICK_INTERVAL = 1.0      # Seconds of wall clock per tick
TICK_SECONDS = 1         # Simulated seconds per tick
DEFAULT_SEED = 42

# Signal Timings
YELLOW_TIME = 3
RED_TIME_ECO = 20
RED_TIME_OPTIMIZED = 25
RED_TIME_DEFAULT = 35
GREEN_TIME_ECO = 45
GREEN_TIME_OPTIMIZED = 40
GREEN_TIME_DEFAULT = 30
MANUAL_PHASE_TIME = 30

# Traffic Caps / Floors
MAX_VEHICLE_COUNT = 50
MAX_QUEUE_LENGTH = 15
MAX_WAIT_TIME = 90
MIN_WAIT_TIME = 10
IDLE_RELIEF_ON_GREEN = 5

# Random increments (inclusive bounds)
RED_VEHICLE_ARRIVALS = (0, 2)
RED_QUEUE_GROWTH = (0, 1)
RED_WAIT_GROWTH = (0, 2)
GREEN_VEHICLE_DEPARTURES = (2, 5)
GREEN_QUEUE_DISCHARGE = (1, 3)
GREEN_WAIT_RELIEF = (1, 2)
VEHICLES_PROCESSED_PER_TICK = (0, 4)

# Congestion thresholds (queue length strictly greater than)
HIGH_CONGESTION_QUEUE = 8
MEDIUM_CONGESTION_QUEUE = 4

# Efficiency
EFFICIENCY_WAIT_WEIGHT = 0.8
EFFICIENCY_QUEUE_WEIGHT = 3
MIN_EFFICIENCY = 20
MAX_EFFICIENCY = 100

# Emissions model (illustrative)
CO2_PER_IDLE_SECOND = 0.12   # kg/h per second of accumulated idling
CO2_PER_QUEUED_VEHICLE = 2.1 # kg/h per queued vehicle
FUEL_PER_KG_CO2 = 0.42       # L/h per kg/h CO2
BASELINE_CO2_FACTOR = 1.4    # Unoptimized network emits 40% more
BASELINE_FUEL_FACTOR = 1.35  # Unoptimized network burns 35% more

# Environmental snapshot
AQI_BASE = 80
AQI_FLOOR = 25
AQI_IDLE_DIVISOR = 10
NOISE_IDLE_DIVISOR = 30
MAX_NOISE_REDUCTION = 15
MAX_PARTICLE_REDUCTION = 40

# Rollup accumulation: each tick credits one simulated minute of savings
MINUTES_PER_HOUR = 60

# Alerts & impact
HIGH_EMISSION_THRESHOLD = 25.0
GOOD_AIR_QUALITY = 50
MODERATE_AIR_QUALITY = 100
SENSITIVE_AIR_QUALITY = 150
KG_CO2_PER_TREE = 22
KG_CO2_PER_CAR_DAY = 4600
KWH_PER_LITER_FUEL = 9.7
