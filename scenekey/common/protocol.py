"""
Pydantic models for scene-service payloads.

- Defines the structure of the business scene list:
  { "data": [ { "id": ..., "sceneKey": base64, ... }, ... ] }
- Provides a helper to parse raw JSON (bytes or str) into a model.

Only `sceneKey` is required; the remaining fields are carried along
for callers and default when the service omits them.
"""

import json
from typing import List, Optional, Union
from pydantic import BaseModel, ConfigDict, ValidationError


class BusinessScene(BaseModel):
    """
    One scene registered to a business.
    { "id": "...", "businessId": 1, "sceneKey": base64, "is_active": true, ... }
    """
    model_config = ConfigDict(extra="ignore")

    id: str = ""
    businessId: int = 0
    boothId: Optional[str] = None
    eventId: Optional[str] = None
    sceneKey: str     # Base64 encoded (AES encrypted) scene key
    platforms: List[str] = []
    createdAt: str = ""
    updatedAt: str = ""
    is_active: bool = True


class SceneListResponse(BaseModel):
    """Scene service -> viewer: { "data": [BusinessScene, ...] }"""
    model_config = ConfigDict(extra="ignore")

    data: List[BusinessScene]


def parse_scene_list(data: Union[bytes, str]) -> SceneListResponse:
    """
    Parses a raw scene-list response body into a SceneListResponse.
    """
    try:
        if isinstance(data, bytes):
            data = data.decode('utf-8')
        payload = json.loads(data)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ValueError(f"Invalid JSON data: {e}") from e

    try:
        return SceneListResponse.model_validate(payload)
    except ValidationError as e:
        raise ValueError(f"Scene list validation failed: {e}") from e
