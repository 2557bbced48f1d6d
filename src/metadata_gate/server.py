import logging

from fastapi import FastAPI, Response, status
from fastapi.responses import ORJSONResponse

from metadata_gate.config.logging_config import setup_logging
from metadata_gate.contracts.filter_request import FilterRequest
from metadata_gate.contracts.probe_outcome import ProbeOutcome
from metadata_gate.core.metadata_gate import MetadataReachabilityGate

# Set up logging at the start of the module
setup_logging()
logger = logging.getLogger(__name__)

gate = MetadataReachabilityGate()

app = FastAPI(default_response_class=ORJSONResponse)


@app.post("/filter")
async def filter_record(event: FilterRequest):
    result = await gate.evaluate_async(event.tag, event.time, event.record)
    if result is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return result


@app.get("/probe", response_model=ProbeOutcome)
async def probe_metadata():
    return await gate.probe.aprobe()


logger.info("Metadata gate server module loaded and logging is configured.")
