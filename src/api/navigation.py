import dotenv
from loguru import logger

from ..settings import Audience, InvalidAudienceError
from ..settings.defaults import get_registry

dotenv.load_dotenv()


def _flatten(grouped: dict[int, list]) -> list[tuple[int, object]]:
    """Flatten a priority mapping into (priority, item) pairs in display order."""
    return [(priority, item) for priority in sorted(grouped) for item in grouped[priority]]


async def navigation(
    audience: str,
    section_id: str | None = None,
    is_sub_admin: bool = False,
) -> dict:
    """Describe the settings navigation of an audience.

    Args:
        audience: "admin" or "personal"
        section_id: Section whose settings panels should be included
        is_sub_admin: Hide admin panels not allowed for sub-administrators

    Returns:
        dict: Sections, and settings of the requested section, in display order.
    """
    logger.info(f"Navigation requested for audience={audience} section={section_id}")

    try:
        audience = Audience.parse(audience)
    except InvalidAudienceError as e:
        logger.warning(str(e))
        return {"status": "error", "message": str(e)}

    registry = get_registry()
    try:
        sections = [
            {
                "id": section.get_id(),
                "name": section.get_name(),
                "priority": priority,
                "icon": section.get_icon(),
            }
            for priority, section in _flatten(registry.get_sections(audience))
        ]
        response = {
            "status": "success",
            "audience": audience.value,
            "sections": sections,
        }

        if section_id is not None:
            response["section_id"] = section_id
            response["settings"] = [
                {
                    "priority": priority,
                    "name": provider.get_name(),
                    "form": provider.get_form(),
                }
                for priority, provider in _flatten(
                    registry.get_settings(audience, section_id, is_sub_admin=is_sub_admin)
                )
            ]
    except Exception as e:
        logger.error(f"Error building {audience.value} navigation: {e}")
        return {"status": "error", "message": str(e)}

    return response
