"""
Scene key resolution.

The scene service hands out scene keys encrypted with a per-business
key. These helpers decrypt them in bulk and match them against the
names of the scenes in the gallery, so the viewer only lists scenes
the business owns.
"""

from typing import Iterable, List, Optional, Union

from scenekey.common.log import get_logger
from scenekey.common.protocol import BusinessScene, SceneListResponse, parse_scene_list
from scenekey.crypto import aes

logger = get_logger("scenes")

ScenePayload = Union[bytes, str, SceneListResponse]


def _as_scene_list(payload: ScenePayload) -> SceneListResponse:
    if isinstance(payload, SceneListResponse):
        return payload
    return parse_scene_list(payload)


def decrypt_scene_key(scene: BusinessScene, key: Optional[str]) -> str:
    return aes.decode(scene.sceneKey, key)


def decrypt_scene_keys(payload: ScenePayload, key: Optional[str]) -> List[str]:
    """
    Decrypts the sceneKey of every scene in the payload, in order.

    No scene is skipped, whatever its is_active flag. The first failure
    propagates with the codec's error type; a partial list is never
    returned.
    """
    scenes = _as_scene_list(payload).data
    logger.debug("Decrypting %d scene keys", len(scenes))
    return [decrypt_scene_key(scene, key) for scene in scenes]


def allowed_scenes(names: Iterable[str], payload: ScenePayload, key: Optional[str]) -> List[str]:
    """
    Filters gallery scene names down to those owned by the business.

    A name is kept when it equals one of the decrypted scene keys in
    the payload. Input order and duplicates are preserved.
    """
    owned = set(decrypt_scene_keys(payload, key))
    return [name for name in names if name in owned]


def active_scene_keys(payload: ScenePayload, key: Optional[str]) -> List[str]:
    """
    Like decrypt_scene_keys(), restricted to scenes flagged is_active.

    This is a convenience filter for tooling; gallery matching goes
    through allowed_scenes(), which considers every scene.
    """
    scenes = [s for s in _as_scene_list(payload).data if s.is_active]
    return [decrypt_scene_key(scene, key) for scene in scenes]
