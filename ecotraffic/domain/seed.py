# Seed data for the demo network. Every kernel reset starts from these records.

SEED_INTERSECTIONS = [
    {
        "intersection": "Main St & 1st Ave",
        "vehicleCount": 12,
        "avgWaitTime": 25,
        "congestionLevel": "low",
        "lightStatus": "green",
        "mlRecommendation": "Optimal timing - maintain current cycle",
        "coordinates": {"x": 200, "y": 150},
        "efficiency": 89,
        "queueLength": 3,
        "idleTime": 45,
        "co2Emissions": 12.5,
        "fuelConsumption": 5.2,
    },
    {
        "intersection": "Broadway & 2nd St",
        "vehicleCount": 28,
        "avgWaitTime": 45,
        "congestionLevel": "medium",
        "lightStatus": "red",
        "mlRecommendation": "Reduce red phase by 8s to minimize emissions",
        "coordinates": {"x": 350, "y": 200},
        "efficiency": 67,
        "queueLength": 8,
        "idleTime": 180,
        "co2Emissions": 28.7,
        "fuelConsumption": 12.1,
    },
    {
        "intersection": "Oak Ave & 3rd St",
        "vehicleCount": 8,
        "avgWaitTime": 15,
        "congestionLevel": "low",
        "lightStatus": "green",
        "mlRecommendation": "Low traffic - extend green for eco-efficiency",
        "coordinates": {"x": 150, "y": 300},
        "efficiency": 95,
        "queueLength": 2,
        "idleTime": 20,
        "co2Emissions": 6.8,
        "fuelConsumption": 2.9,
    },
    {
        "intersection": "Pine St & 4th Ave",
        "vehicleCount": 35,
        "avgWaitTime": 52,
        "congestionLevel": "high",
        "lightStatus": "yellow",
        "mlRecommendation": "High emissions detected - priority eco-timing",
        "coordinates": {"x": 400, "y": 120},
        "efficiency": 54,
        "queueLength": 12,
        "idleTime": 240,
        "co2Emissions": 42.3,
        "fuelConsumption": 17.8,
    },
]

SEED_LIGHTS = [
    {"id": "TL001", "status": "green", "timeRemaining": 35, "autoMode": True,
     "intersection": "Main St & 1st Ave", "cycleOptimized": True, "ecoMode": True},
    {"id": "TL002", "status": "red", "timeRemaining": 28, "autoMode": True,
     "intersection": "Broadway & 2nd St", "cycleOptimized": True, "ecoMode": True},
    {"id": "TL003", "status": "green", "timeRemaining": 42, "autoMode": True,
     "intersection": "Oak Ave & 3rd St", "cycleOptimized": False, "ecoMode": False},
    {"id": "TL004", "status": "yellow", "timeRemaining": 3, "autoMode": True,
     "intersection": "Pine St & 4th Ave", "cycleOptimized": True, "ecoMode": True},
]

SEED_ENVIRONMENT = {
    "co2Reduced": 118.7,
    "fuelSaved": 49.8,
    "airQualityIndex": 45,
    "noiseReduction": 8.5,
    "particleReduction": 23,
}

SEED_STATS = {
    "totalIntersections": 4,
    "avgWaitTime": 34,
    "trafficFlow": 76,
    "mlAccuracy": 94,
    "activeAlerts": 1,
    "energySaved": 28,
    "vehiclesProcessed": 1247,
    "totalCO2Saved": 2847,
    "totalFuelSaved": 1234,
}

# Street segments drawn on the map (both directions are added)
ROAD_LINKS = [
    ("Main St & 1st Ave", "Broadway & 2nd St"),
    ("Main St & 1st Ave", "Oak Ave & 3rd St"),
    ("Main St & 1st Ave", "Pine St & 4th Ave"),
    ("Broadway & 2nd St", "Pine St & 4th Ave"),
]
