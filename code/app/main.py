import logging
import os
from datetime import date

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.core.models import ProjectionRequest, ProjectionResponse, ScoreRequest, ScoreResponse
from app.core.pipeline import list_shock_presets, run_projection, run_score
from wealth.errors import WealthError

WEALTH_LOG_LEVEL = os.getenv("WEALTH_LOG_LEVEL", "INFO").upper()

logging.basicConfig(level=WEALTH_LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title="WealthTrace Projection API")


@app.exception_handler(WealthError)
async def wealth_error_handler(request: Request, exc: WealthError):
    logger.warning("rejected %s: %s", request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/shocks/presets")
def shock_presets():
    return list_shock_presets(date.today().year)


@app.post("/score", response_model=ScoreResponse)
def score(payload: ScoreRequest):
    return run_score(payload)


@app.post("/project", response_model=ProjectionResponse)
def project(payload: ProjectionRequest):
    return run_projection(payload)
