from typing import Any, Dict, Optional
from services.storage_svc import Storage


def find_profile(storage: Storage, key: str) -> Optional[Dict[str, Any]]:
    """
    Resolve a profile from either its own id or the owning user's id.
    Clients hold whichever one they saw last, so both are accepted.
    """
    if not key:
        return None
    return storage.get_profile(key) or storage.get_profile_by_user(key)


def create_profile(storage: Storage, user_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
    return storage.create_profile(user_id, fields)


def update_profile(storage: Storage, profile_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    # userId is fixed at creation: a profile never changes owner
    fields = {k: v for k, v in fields.items() if k not in ("id", "userId", "createdAt")}
    return storage.update_profile(profile_id, fields)
