import asyncio
import logging
import sys
from contextlib import asynccontextmanager
from typing import List

from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware

from ecotraffic.domain import config
from ecotraffic.domain.models import (
    Alert, CommandResult, DashboardSnapshot, EnvironmentReport, ImpactSummary, Intersection,
    ModeToggle, NetworkMap, PhaseUpdate, SystemStats, TrafficLight
)
from ecotraffic.kernel.simulation_kernel import SimulationKernel
from ecotraffic.kernel.ticker import Ticker

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)

logger = logging.getLogger(__name__)

# Initialize Kernel
kernel = SimulationKernel()
ticker = Ticker(kernel)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: seed the network and start ticking
    kernel.initialize(seed=config.DEFAULT_SEED)
    ticker.start()
    yield
    # Shutdown
    await ticker.stop()

app = FastAPI(title="Eco Traffic Control API", lifespan=lifespan)

# Enable CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

def _light_or_404(result: CommandResult) -> TrafficLight:
    if not result.applied:
        raise HTTPException(status_code=404, detail=result.detail)
    return result.light

@app.get("/")
def read_root():
    return {"status": "Eco Traffic Control Backend Running", "tick": kernel.state.tick_id}

@app.get("/api/dashboard", response_model=DashboardSnapshot)
async def get_dashboard():
    """Returns the full dashboard snapshot for the current tick"""
    return kernel.get_snapshot()

@app.get("/api/intersections", response_model=List[Intersection])
async def get_intersections():
    return kernel.get_intersections()

@app.get("/api/intersections/{name}", response_model=Intersection)
async def get_intersection(name: str):
    intersection = kernel.get_intersection(name)
    if not intersection:
        raise HTTPException(status_code=404, detail="Intersection not found")
    return intersection

@app.get("/api/lights", response_model=List[TrafficLight])
async def get_lights():
    return kernel.get_lights()

@app.get("/api/lights/{light_id}", response_model=TrafficLight)
async def get_light(light_id: str):
    light = kernel.get_light(light_id)
    if not light:
        raise HTTPException(status_code=404, detail="Traffic light not found")
    return light

@app.post("/api/lights/{light_id}/auto", response_model=TrafficLight)
async def set_auto_mode(light_id: str, toggle: ModeToggle):
    """Switches a light between automatic cycling and manual control"""
    return _light_or_404(kernel.set_auto_mode(light_id, toggle.enabled))

@app.post("/api/lights/{light_id}/eco", response_model=TrafficLight)
async def set_eco_mode(light_id: str, toggle: ModeToggle):
    """Eco timing applies from the light's next phase change"""
    return _light_or_404(kernel.set_eco_mode(light_id, toggle.enabled))

@app.post("/api/lights/{light_id}/optimize", response_model=TrafficLight)
async def set_optimized(light_id: str, toggle: ModeToggle):
    return _light_or_404(kernel.set_optimized(light_id, toggle.enabled))

@app.post("/api/lights/{light_id}/phase", response_model=TrafficLight)
async def set_phase(light_id: str, update: PhaseUpdate):
    """Forces a phase and restarts the countdown"""
    return _light_or_404(kernel.manual_set_phase(light_id, update.phase))

@app.get("/api/environment", response_model=EnvironmentReport)
async def get_environment():
    return kernel.get_environment()

@app.get("/api/stats", response_model=SystemStats)
async def get_stats():
    return kernel.get_stats()

@app.get("/api/impact", response_model=ImpactSummary)
async def get_impact():
    """Cumulative savings expressed as everyday equivalents"""
    return kernel.get_impact()

@app.get("/api/alerts", response_model=List[Alert])
async def get_alerts():
    return kernel.get_alerts()

@app.get("/api/network", response_model=NetworkMap)
async def get_network():
    """Returns the map layout with each intersection's current status"""
    return kernel.get_network_map()

def _offer_latest(snapshots: asyncio.Queue, snapshot: DashboardSnapshot):
    """Keeps only the newest snapshot for a client that has fallen behind"""
    if snapshots.full():
        snapshots.get_nowait()
    snapshots.put_nowait(snapshot)

@app.websocket("/ws/dashboard")
async def stream_dashboard(websocket: WebSocket):
    """Sends the current snapshot, then the latest snapshot after each tick"""
    await websocket.accept()
    loop = asyncio.get_running_loop()
    snapshots: asyncio.Queue = asyncio.Queue(maxsize=1)

    # Ticks may be driven from another thread (test clients, scripts)
    unsubscribe = kernel.subscribe(lambda snapshot: loop.call_soon_threadsafe(_offer_latest, snapshots, snapshot))

    async def forward_snapshots():
        while True:
            snapshot = await snapshots.get()
            await websocket.send_json(snapshot.model_dump(mode="json"))

    sender = None
    try:
        await websocket.send_json(kernel.get_snapshot().model_dump(mode="json"))
        sender = asyncio.create_task(forward_snapshots())
        # Client messages are ignored, receiving only detects the disconnect
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        logger.info("Dashboard stream client disconnected")
    finally:
        unsubscribe()
        if sender is not None:
            sender.cancel()
            outcome = (await asyncio.gather(sender, return_exceptions=True))[0]
            if outcome is not None and not isinstance(outcome, asyncio.CancelledError):
                logger.warning("Dashboard stream send failed: %r", outcome)

def run():
    """Run the application using uvicorn."""
    import uvicorn

    uvicorn.run(
        "ecotraffic.main:app",
        host=config.HOST,
        port=config.PORT,
        log_level=config.LOG_LEVEL.lower(),
    )

if __name__ == "__main__":
    run()
