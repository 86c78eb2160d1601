import os
import re
import logging
from functools import wraps
from typing import Optional, Dict, Any, List, Iterable
import firebase_admin
from firebase_admin import credentials, firestore
from google.api_core import exceptions as google_exceptions
from services.storage_svc import StorageError, new_id, utcnow_iso

logger = logging.getLogger(__name__)

_COLLECTION_RE = re.compile(r"^[A-Za-z0-9_\-]{1,64}$")

USERS = "users"
PROFILES = "student_profiles"
SCHOLARSHIPS = "scholarships"
MATCHES = "scholarship_matches"
GUIDANCE = "application_guidance"

# Firestore caps a write batch at 500 operations
CHUNK = 400


def init_firebase():
    """Initialize the default Firebase app once per process."""
    if firebase_admin._apps:
        return
    cred_path = os.getenv("GOOGLE_APPLICATION_CREDENTIALS")
    if not cred_path or not os.path.exists(cred_path):
        raise RuntimeError("Missing GOOGLE_APPLICATION_CREDENTIALS env")
    firebase_admin.initialize_app(credentials.Certificate(cred_path))
    logger.info(f"✅ Firebase initialized: {cred_path}")


def _ensure_valid_collection(collection: str) -> str:
    if not _COLLECTION_RE.match(collection):
        raise ValueError("Invalid collection name")
    return collection


def _to_record(snap) -> Dict[str, Any]:
    return {**snap.to_dict(), "id": snap.id}


def _wrap_errors(func):
    """Translate Firestore client failures into StorageError."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except google_exceptions.GoogleAPIError as e:
            logger.error(f"❌ Firestore error in {func.__name__}: {e}")
            raise StorageError(f"Storage operation '{func.__name__}' failed") from e
    return wrapper


class FirestoreStorage:
    """
    Persistent store on Cloud Firestore.

    One top-level collection per entity; relations are plain id fields
    (userId, profileId, scholarshipId). Requires firebase_admin to be
    initialized before the first call.
    """

    def __init__(self, client=None):
        self._client = client

    def _db(self):
        if self._client is None:
            self._client = firestore.client()
        return self._client

    def _col(self, collection: str):
        return self._db().collection(_ensure_valid_collection(collection))

    def _get(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        snap = self._col(collection).document(doc_id).get()
        return _to_record(snap) if snap.exists else None

    def _first_where(self, collection: str, field: str, value: Any) -> Optional[Dict[str, Any]]:
        docs = self._col(collection).where(field, "==", value).limit(1).stream()
        for doc in docs:
            return _to_record(doc)
        return None

    # ==================== Users ====================

    @_wrap_errors
    def create_user(self, data: Dict[str, Any]) -> Dict[str, Any]:
        user_id = data.get("id") or new_id()
        doc = {k: v for k, v in data.items() if k != "id"}
        doc["createdAt"] = utcnow_iso()
        self._col(USERS).document(user_id).set(doc)
        return {**doc, "id": user_id}

    @_wrap_errors
    def get_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        return self._get(USERS, user_id)

    @_wrap_errors
    def get_user_by_username(self, username: str) -> Optional[Dict[str, Any]]:
        return self._first_where(USERS, "username", username)

    # ==================== Student Profiles ====================

    @_wrap_errors
    def create_profile(self, user_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        now = utcnow_iso()
        doc = {**data, "userId": user_id, "createdAt": now, "updatedAt": now}
        ref = self._col(PROFILES).document()  # auto-id
        ref.set(doc)
        return {**doc, "id": ref.id}

    @_wrap_errors
    def get_profile(self, profile_id: str) -> Optional[Dict[str, Any]]:
        return self._get(PROFILES, profile_id)

    @_wrap_errors
    def get_profile_by_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        return self._first_where(PROFILES, "userId", user_id)

    @_wrap_errors
    def update_profile(self, profile_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        ref = self._col(PROFILES).document(profile_id)
        snap = ref.get()
        if not snap.exists:
            return None
        updates = {**fields, "updatedAt": utcnow_iso()}
        ref.update(updates)
        return {**snap.to_dict(), **updates, "id": profile_id}

    @_wrap_errors
    def list_profiles(self) -> List[Dict[str, Any]]:
        return [_to_record(doc) for doc in self._col(PROFILES).stream()]

    # ==================== Scholarships ====================

    @_wrap_errors
    def list_scholarships(self, active_only: bool = True) -> List[Dict[str, Any]]:
        query = self._col(SCHOLARSHIPS)
        if active_only:
            query = query.where("isActive", "==", True)
        return [_to_record(doc) for doc in query.stream()]

    @_wrap_errors
    def get_scholarship(self, scholarship_id: str) -> Optional[Dict[str, Any]]:
        return self._get(SCHOLARSHIPS, scholarship_id)

    @_wrap_errors
    def save_scholarships(self, rows: Iterable[Dict[str, Any]]) -> List[str]:
        db = self._db()
        col_ref = self._col(SCHOLARSHIPS)

        ids: List[str] = []
        batch = db.batch()
        ops = 0

        for row in rows:
            doc = {k: v for k, v in row.items() if k != "id"}
            doc.setdefault("createdAt", utcnow_iso())
            ref = col_ref.document(str(row["id"])) if row.get("id") else col_ref.document()
            batch.set(ref, doc)
            ids.append(ref.id)
            ops += 1

            if ops >= CHUNK:
                batch.commit()
                batch = db.batch()
                ops = 0

        if ops:
            batch.commit()

        return ids

    # ==================== Matches ====================

    @_wrap_errors
    def create_matches(self, rows: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
        db = self._db()
        col_ref = self._col(MATCHES)

        created: List[Dict[str, Any]] = []
        batch = db.batch()
        ops = 0

        for row in rows:
            doc = {**row, "createdAt": utcnow_iso()}
            ref = col_ref.document()  # auto-id
            batch.set(ref, doc)
            created.append({**doc, "id": ref.id})
            ops += 1

            if ops >= CHUNK:
                batch.commit()
                batch = db.batch()
                ops = 0

        if ops:
            batch.commit()

        return created

    @_wrap_errors
    def list_matches(self, profile_id: str) -> List[Dict[str, Any]]:
        docs = self._col(MATCHES).where("profileId", "==", profile_id).stream()
        return [_to_record(doc) for doc in docs]

    @_wrap_errors
    def get_match(self, match_id: str) -> Optional[Dict[str, Any]]:
        return self._get(MATCHES, match_id)

    @_wrap_errors
    def update_match_status(self, match_id: str, status: str) -> Optional[Dict[str, Any]]:
        ref = self._col(MATCHES).document(match_id)
        snap = ref.get()
        if not snap.exists:
            return None
        ref.update({"status": status})
        return {**snap.to_dict(), "status": status, "id": match_id}

    # ==================== Application Guidance ====================

    @_wrap_errors
    def create_guidance(self, data: Dict[str, Any]) -> Dict[str, Any]:
        doc = {**data, "createdAt": utcnow_iso()}
        ref = self._col(GUIDANCE).document()
        ref.set(doc)
        return {**doc, "id": ref.id}

    @_wrap_errors
    def get_latest_guidance(self, profile_id: str, scholarship_id: str) -> Optional[Dict[str, Any]]:
        docs = self._col(GUIDANCE)\
            .where("profileId", "==", profile_id)\
            .where("scholarshipId", "==", scholarship_id)\
            .stream()
        rows = [_to_record(doc) for doc in docs]
        if not rows:
            return None
        # ISO timestamps sort lexicographically
        return max(rows, key=lambda r: r.get("createdAt", ""))

    def ping(self) -> bool:
        try:
            next(iter(self._col(SCHOLARSHIPS).limit(1).stream()), None)
            return True
        except Exception as e:
            logger.warning(f"⚠️  Firestore ping failed: {e}")
            return False
