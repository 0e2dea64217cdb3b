from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from connectvi.config import Settings, settings
from connectvi.logging_config import configure_logging
from connectvi.timetable import get_timetable
from connectvi.stations import router as stations_router
from connectvi.routes import router as routes_router
from connectvi.assistant import router as assistant_router
from connectvi.live import router as live_router
from connectvi.live import LivePositionSimulator, SimulationTask, WebSocketManager

logger = logging.getLogger(__name__)

def create_app(app_settings: Settings = settings) -> FastAPI:
    """Build the API application"""
    
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        timetable = get_timetable()
        simulator = LivePositionSimulator.from_settings(timetable, app_settings)
        ws_manager = WebSocketManager()
        simulator.add_update_callback(ws_manager.broadcast_positions)
        
        app.state.simulator = simulator
        app.state.ws_manager = ws_manager
        
        if not app_settings.SIMULATION_ENABLED:
            logger.info("Live position simulation disabled")
            yield
            return
        
        async with SimulationTask(simulator):
            yield
    
    app = FastAPI(
        title=app_settings.PROJECT_NAME,
        version="1.0.0",
        description="Bus route search, trip assistant and live vehicle positions",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )
    
    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    # Include routers
    app.include_router(
        stations_router,
        prefix=f"{app_settings.API_V1_STR}/stops",
        tags=["Stops & Search"]
    )
    
    app.include_router(
        routes_router,
        prefix=f"{app_settings.API_V1_STR}/routes",
        tags=["Routes"]
    )
    
    app.include_router(
        assistant_router,
        prefix=f"{app_settings.API_V1_STR}/assistant",
        tags=["Trip Assistant"]
    )
    
    app.include_router(
        live_router,
        prefix=f"{app_settings.API_V1_STR}/live",
        tags=["Live Positions"]
    )
    
    @app.get("/")
    def root():
        """Root endpoint"""
        return {
            "message": app_settings.PROJECT_NAME,
            "version": "1.0.0",
            "docs": "/docs"
        }
    
    @app.get("/health")
    def health_check():
        """Health check endpoint"""
        return {"status": "healthy"}
    
    return app

configure_logging()
app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
