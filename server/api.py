"""FastAPI server exposing the health analysis endpoints."""

from fastapi import FastAPI

from health_app.app import HealthIntelligenceApp
from health_app.logging_config import configure_logging
from logic.validation import AnalyzeRequest, ForecastRequest

configure_logging()

health_app = HealthIntelligenceApp()
app = FastAPI(title="Bio-Weather Health Intelligence", version="0.1.0")


@app.get("/healthz")
async def healthcheck() -> dict:
    """Lightweight readiness check."""

    return {
        "status": "ok",
        "service": "health-intelligence",
        "environment": health_app.config.environment or "local",
        "language": health_app.config.settings.language,
    }


@app.post("/analyze")
async def analyze(request: AnalyzeRequest) -> dict:
    """Run the full analysis for the posted current conditions and hourly forecast."""

    return health_app.analyze_request(request)


@app.post("/forecast")
async def forecast(request: ForecastRequest) -> dict:
    """Return the 24-hour outdoor forecast view."""

    return health_app.forecast_request(request)


def get_app() -> FastAPI:
    """Expose the FastAPI instance for ASGI servers."""

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.api:app", host="0.0.0.0", port=8080, reload=False)
