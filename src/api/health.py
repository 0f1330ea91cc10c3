from typing import Literal

import dotenv
from loguru import logger

from src.config import SettingsManager
from src.settings.defaults import get_registry

dotenv.load_dotenv()

async def health(
        route: Literal['registry'] | None = None,
    ) -> dict:
    """Health check function.

    Args:
        route (str): Specific route to check. Only 'registry' is supported.

    Returns:
        dict: Health status information.
    """
    logger.info("Health check invoked")

    # Validate settings
    settings = SettingsManager.get_instance()
    errors = settings.validate()
    if errors:
        logger.error(f"Settings validation errors: {errors}")
        return {"status": "error", "errors": errors}

    if route is None:
        logger.info("No specific route provided, returning overall readiness")
        return {"status": "success"}

    route_normalised = route.strip().lower()
    logger.info(f"Health check route: {route_normalised}")

    if route_normalised == "registry":
        # Resolve every registered section once
        try:
            registry = get_registry()
            admin = sum(len(s) for s in registry.get_admin_sections().values())
            personal = sum(len(s) for s in registry.get_personal_sections().values())
            logger.info(f"Registry resolved {admin} admin and {personal} personal sections")
            return {"status": "success", "registry": f"ready ({admin} admin, {personal} personal sections)"}
        except Exception as e:
            logger.error(f"Registry check failed: {e}")
            return {"status": "error", "registry": "unavailable", "error": str(e)}

    logger.warning(f"Unknown health check route: {route_normalised}")
    return {"status": "error", "error": f"Unknown route: {route_normalised}"}
