"""Configuration API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from models.diff import EngineSettings
from services.config_manager import ConfigManager
from services.diff_generator import DiffGenerator

router = APIRouter()


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration"""

    engine: EngineSettings | None = None
    server: dict | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    engine: dict
    server: dict


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config = ConfigManager.get_instance().get_config()

    return ConfigResponse(
        engine=config.get("engine", {}),
        server=config.get("server", {}),
    )


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update configuration"""
    config_manager = ConfigManager.get_instance()
    current_config = config_manager.get_config()

    # Update only provided fields
    if request.engine is not None:
        # Only the fields the caller sent, already parsed by pydantic
        changes = request.engine.model_dump(mode="json", by_alias=True, exclude_unset=True)
        current_config["engine"] = {**current_config.get("engine", {}), **changes}
    if request.server is not None:
        current_config["server"] = {**current_config.get("server", {}), **request.server}

    # Reject settings the engine cannot run with before persisting them
    try:
        DiffGenerator.from_config(current_config)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    config_manager.save_config(current_config)

    return {"status": "success", "message": "Configuration updated"}
