"""
Storage abstraction for users, profiles, scholarships, matches and guidance.

Two implementations exist:
- InMemoryStorage: process-local dictionaries, used for demos and tests
- FirestoreStorage (services/firestore_svc.py): the persistent backend

The backend is selected once at process start (STORAGE_BACKEND) and never
mixed at runtime. Every record is a plain dict with camelCase keys and an
'id' field, the same shape the HTTP layer returns.
"""
import copy
import logging
import os
import threading
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Protocol

logger = logging.getLogger(__name__)

STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "memory").lower()


class StorageError(Exception):
    """Raised when the persistence layer fails (surfaced as HTTP 500)."""


def new_id() -> str:
    return uuid.uuid4().hex


def utcnow_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class Storage(Protocol):
    # Users
    def create_user(self, data: Dict[str, Any]) -> Dict[str, Any]: ...
    def get_user(self, user_id: str) -> Optional[Dict[str, Any]]: ...
    def get_user_by_username(self, username: str) -> Optional[Dict[str, Any]]: ...

    # Student profiles
    def create_profile(self, user_id: str, data: Dict[str, Any]) -> Dict[str, Any]: ...
    def get_profile(self, profile_id: str) -> Optional[Dict[str, Any]]: ...
    def get_profile_by_user(self, user_id: str) -> Optional[Dict[str, Any]]: ...
    def update_profile(self, profile_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]: ...
    def list_profiles(self) -> List[Dict[str, Any]]: ...

    # Scholarships
    def list_scholarships(self, active_only: bool = True) -> List[Dict[str, Any]]: ...
    def get_scholarship(self, scholarship_id: str) -> Optional[Dict[str, Any]]: ...
    def save_scholarships(self, rows: Iterable[Dict[str, Any]]) -> List[str]: ...

    # Matches
    def create_matches(self, rows: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]: ...
    def list_matches(self, profile_id: str) -> List[Dict[str, Any]]: ...
    def get_match(self, match_id: str) -> Optional[Dict[str, Any]]: ...
    def update_match_status(self, match_id: str, status: str) -> Optional[Dict[str, Any]]: ...

    # Application guidance
    def create_guidance(self, data: Dict[str, Any]) -> Dict[str, Any]: ...
    def get_latest_guidance(self, profile_id: str, scholarship_id: str) -> Optional[Dict[str, Any]]: ...

    def ping(self) -> bool: ...


class InMemoryStorage:
    """Map-backed store. Returns copies so callers never mutate stored rows."""

    def __init__(self):
        self._lock = threading.Lock()
        self._users: Dict[str, Dict[str, Any]] = {}
        self._profiles: Dict[str, Dict[str, Any]] = {}
        self._scholarships: Dict[str, Dict[str, Any]] = {}
        self._matches: Dict[str, Dict[str, Any]] = {}
        self._guidance: List[Dict[str, Any]] = []

    # ==================== Users ====================

    def create_user(self, data: Dict[str, Any]) -> Dict[str, Any]:
        with self._lock:
            user = {**data, "id": data.get("id") or new_id(), "createdAt": utcnow_iso()}
            self._users[user["id"]] = user
            return copy.deepcopy(user)

    def get_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            user = self._users.get(user_id)
            return copy.deepcopy(user) if user else None

    def get_user_by_username(self, username: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            for user in self._users.values():
                if user.get("username") == username:
                    return copy.deepcopy(user)
            return None

    # ==================== Student Profiles ====================

    def create_profile(self, user_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        now = utcnow_iso()
        profile = {**data, "id": new_id(), "userId": user_id, "createdAt": now, "updatedAt": now}
        with self._lock:
            self._profiles[profile["id"]] = profile
            return copy.deepcopy(profile)

    def get_profile(self, profile_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            profile = self._profiles.get(profile_id)
            return copy.deepcopy(profile) if profile else None

    def get_profile_by_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            for profile in self._profiles.values():
                if profile.get("userId") == user_id:
                    return copy.deepcopy(profile)
            return None

    def update_profile(self, profile_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        with self._lock:
            profile = self._profiles.get(profile_id)
            if profile is None:
                return None
            profile.update(fields)
            profile["updatedAt"] = utcnow_iso()
            return copy.deepcopy(profile)

    def list_profiles(self) -> List[Dict[str, Any]]:
        with self._lock:
            return [copy.deepcopy(p) for p in self._profiles.values()]

    # ==================== Scholarships ====================

    def list_scholarships(self, active_only: bool = True) -> List[Dict[str, Any]]:
        with self._lock:
            rows = [copy.deepcopy(s) for s in self._scholarships.values()]
        if active_only:
            rows = [s for s in rows if s.get("isActive", True)]
        return rows

    def get_scholarship(self, scholarship_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            row = self._scholarships.get(scholarship_id)
            return copy.deepcopy(row) if row else None

    def save_scholarships(self, rows: Iterable[Dict[str, Any]]) -> List[str]:
        ids: List[str] = []
        with self._lock:
            for row in rows:
                doc = {**row}
                doc["id"] = str(doc.get("id") or new_id())
                doc.setdefault("createdAt", utcnow_iso())
                self._scholarships[doc["id"]] = doc
                ids.append(doc["id"])
        return ids

    # ==================== Matches ====================

    def create_matches(self, rows: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
        created: List[Dict[str, Any]] = []
        with self._lock:
            for row in rows:
                match = {**row, "id": new_id(), "createdAt": utcnow_iso()}
                self._matches[match["id"]] = match
                created.append(copy.deepcopy(match))
        return created

    def list_matches(self, profile_id: str) -> List[Dict[str, Any]]:
        with self._lock:
            return [copy.deepcopy(m) for m in self._matches.values() if m.get("profileId") == profile_id]

    def get_match(self, match_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            match = self._matches.get(match_id)
            return copy.deepcopy(match) if match else None

    def update_match_status(self, match_id: str, status: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            match = self._matches.get(match_id)
            if match is None:
                return None
            match["status"] = status
            return copy.deepcopy(match)

    # ==================== Application Guidance ====================

    def create_guidance(self, data: Dict[str, Any]) -> Dict[str, Any]:
        guidance = {**data, "id": new_id(), "createdAt": utcnow_iso()}
        with self._lock:
            self._guidance.append(guidance)
            return copy.deepcopy(guidance)

    def get_latest_guidance(self, profile_id: str, scholarship_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            for guidance in reversed(self._guidance):
                if guidance["profileId"] == profile_id and guidance["scholarshipId"] == scholarship_id:
                    return copy.deepcopy(guidance)
            return None

    def ping(self) -> bool:
        return True


# ==================== Backend Selection ====================

_storage: Optional[Storage] = None


def init_storage(backend: Optional[str] = None) -> Storage:
    """Create the process-wide store. Called once at startup."""
    global _storage
    backend = (backend or STORAGE_BACKEND).lower()

    if backend == "memory":
        _storage = InMemoryStorage()
    elif backend == "firestore":
        from services.firestore_svc import FirestoreStorage, init_firebase
        init_firebase()
        _storage = FirestoreStorage()
    else:
        raise RuntimeError(f"Unknown STORAGE_BACKEND '{backend}' (expected 'memory' or 'firestore')")

    logger.info(f"🗄️  Storage backend: {backend}")
    return _storage


def get_storage() -> Storage:
    """FastAPI dependency returning the process-wide store."""
    if _storage is None:
        return init_storage()
    return _storage
