import json

import azure.functions as func
from loguru import logger

from src.api import (
    health as health_handler,
    navigation as navigation_handler,
)


app = func.FunctionApp(http_auth_level=func.AuthLevel.ANONYMOUS)


@app.function_name(name="ping")
@app.route(route="ping", methods=[func.HttpMethod.GET])
async def ping(req: func.HttpRequest) -> func.HttpResponse:
    """Ping endpoint."""
    logger.info("HTTP trigger: ping")
    return func.HttpResponse("pong", status_code=200)


@app.function_name(name="health")
@app.route(route="health", methods=[func.HttpMethod.GET])
async def health(req: func.HttpRequest) -> func.HttpResponse:
    """Health check."""
    logger.info("HTTP trigger: health")
    
    response = await health_handler(route=req.params.get("route", None))
    if response["status"] == "success":
        return func.HttpResponse(
            json.dumps(response),
            status_code=200
        )

    return func.HttpResponse(
        json.dumps(response),
        status_code=500
    )


@app.function_name(name="settings")
@app.route(route="settings/{audience}", methods=[func.HttpMethod.GET])
async def settings(req: func.HttpRequest) -> func.HttpResponse:
    """Settings navigation for an audience."""
    logger.info("HTTP trigger: settings")

    audience = req.route_params.get("audience")
    if audience not in ("admin", "personal"):
        return func.HttpResponse(
            json.dumps({
                "status": "error",
                "message": "Unknown audience, expected 'admin' or 'personal'",
            }),
            status_code=400
        )

    response = await navigation_handler(
        audience=audience,
        section_id=req.params.get("section", None),
        is_sub_admin=req.params.get("subadmin", "").lower() in ["true", "1", "yes"],
    )

    return func.HttpResponse(
        json.dumps(response),
        status_code=200 if response.get("status") == "success" else 500
    )
