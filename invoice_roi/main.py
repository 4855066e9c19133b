"""FastAPI application for the Invoice ROI Simulator: calculation, scenarios, reports."""

from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from invoice_roi.config.settings import get_settings
from invoice_roi.engine.calculator import compute
from invoice_roi.errors import (
    InvalidInputError,
    MalformedRecordError,
    PersistenceError,
    ReportGenerationError,
    ScenarioNotFoundError,
)
from invoice_roi.reports import build_report, report_filename
from invoice_roi.scenarios import ScenarioService
from invoice_roi.schemas import (
    CalculateResponse,
    CalculatorForm,
    ReportRequest,
    SaveScenarioRequest,
    ScenarioListResponse,
    ScenarioResponse,
    ScenarioSummaryResponse,
)
from invoice_roi.storage import build_scenario_store

settings = get_settings()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Invoice ROI Simulator API", version="0.1.0")

# CORS: allow the browser frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Singleton scenario service over the configured store
_scenario_service = ScenarioService(build_scenario_store(settings))


def get_scenario_service() -> ScenarioService:
    return _scenario_service


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    problems = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"][1:]) or "body"
        problems.append(f"{field}: {err['msg']}")
    return _error(422, "; ".join(problems))


@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError):
    return _error(422, str(exc))


@app.exception_handler(ScenarioNotFoundError)
async def not_found_handler(request: Request, exc: ScenarioNotFoundError):
    return _error(404, str(exc))


@app.exception_handler(PersistenceError)
async def persistence_handler(request: Request, exc: PersistenceError):
    logger.error(f"Persistence failure on {request.method} {request.url.path}: {exc.reason}")
    return _error(502, exc.reason)


@app.exception_handler(MalformedRecordError)
async def malformed_record_handler(request: Request, exc: MalformedRecordError):
    logger.error(f"Malformed scenario record on {request.url.path}: {exc}")
    return _error(500, f"Stored scenario is malformed: {exc}")


@app.exception_handler(ReportGenerationError)
async def report_error_handler(request: Request, exc: ReportGenerationError):
    return _error(500, str(exc))


@app.post("/api/calculate", response_model=CalculateResponse)
async def calculate(body: CalculatorForm):
    """Run the ROI projection for the submitted form."""
    inputs = body.to_inputs()
    return CalculateResponse.build(inputs, compute(inputs))


@app.get("/api/scenarios", response_model=ScenarioListResponse)
async def list_scenarios(service: ScenarioService = Depends(get_scenario_service)):
    """Saved scenarios, newest first."""
    listing = await service.list_scenarios()
    return ScenarioListResponse(
        scenarios=[ScenarioSummaryResponse.from_summary(s) for s in listing.scenarios],
        rejected=listing.rejected,
    )


@app.post("/api/scenarios", response_model=ScenarioResponse, status_code=201)
async def save_scenario(
    body: SaveScenarioRequest,
    service: ScenarioService = Depends(get_scenario_service),
):
    """Calculate and persist a named scenario."""
    inputs = body.inputs.to_inputs()
    scenario = await service.save(
        name=body.scenario_name,
        user_email=body.user_email,
        inputs=inputs,
        results=compute(inputs),
    )
    return ScenarioResponse.from_scenario(scenario)


@app.get("/api/scenarios/{scenario_id}", response_model=ScenarioResponse)
async def get_scenario(
    scenario_id: str,
    recompute: bool = False,
    service: ScenarioService = Depends(get_scenario_service),
):
    """Reload a scenario exactly as stored (or recomputed on request)."""
    scenario = await service.load(scenario_id, recompute=recompute)
    return ScenarioResponse.from_scenario(scenario)


@app.delete("/api/scenarios/{scenario_id}")
async def delete_scenario(
    scenario_id: str,
    service: ScenarioService = Depends(get_scenario_service),
):
    await service.delete(scenario_id)
    return {"deleted": scenario_id}


@app.post("/api/reports")
async def create_report(
    body: ReportRequest,
    service: ScenarioService = Depends(get_scenario_service),
):
    """Generate the PDF report for fresh inputs or a saved scenario."""
    if body.scenario_id is not None:
        scenario = await service.load(body.scenario_id)
        inputs, results = scenario.inputs, scenario.results
    else:
        inputs = body.inputs.to_inputs()
        results = compute(inputs)

    pdf = build_report(
        inputs,
        results,
        company_name=body.company_name,
        contact_email=body.contact_email,
        settings=settings,
    )
    filename = report_filename(body.company_name)
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}
